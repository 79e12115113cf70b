# agente_professor/models/chamada.py

import typing as t

COLECAO = 'chamadas'


def chamada_id(aluno_id: str, turma_id: str, data: str) -> str:
    """Id composto: garante no máximo uma chamada por (aluno, turma, data)."""
    return f"{aluno_id}_{turma_id}_{data}"


class _ChamadaBase(t.TypedDict):
    id: str
    alunoId: str
    turmaId: str
    data: str
    presente: bool
    createdAt: str


class Chamada(_ChamadaBase, total=False):
    observacao: t.Optional[str]
