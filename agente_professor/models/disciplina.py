# agente_professor/models/disciplina.py

import typing as t

COLECAO = 'disciplinas'


class Disciplina(t.TypedDict):
    id: str
    nome: str
    createdAt: str
