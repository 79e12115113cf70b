# agente_professor/models/materia.py

import typing as t

COLECAO = 'materias'


class Materia(t.TypedDict):
    id: str
    nome: str
    disciplinaId: str
    arquivosPath: list[str]
    createdAt: str
