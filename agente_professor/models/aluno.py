# agente_professor/models/aluno.py

import typing as t

COLECAO = 'alunos'


class _AlunoBase(t.TypedDict):
    id: str
    nome: str
    createdAt: str


class Aluno(_AlunoBase, total=False):
    # Foto inline como data URI (data:image/...;base64,...)
    fotoPath: t.Optional[str]
