# agente_professor/models/conteudo_aula.py

import typing as t

COLECAO = 'conteudos'


def conteudo_aula_id(turma_id: str, data: str) -> str:
    return f"{turma_id}_{data}"


class ConteudoAula(t.TypedDict):
    id: str
    turmaId: str
    data: str
    conteudo: str
    fotosPath: list[str]
    createdAt: str
