# agente_professor/models/escola.py

import typing as t

COLECAO = 'escolas'


class Escola(t.TypedDict):
    id: str
    nome: str
    createdAt: str
