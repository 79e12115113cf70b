# agente_professor/models/turma.py

import typing as t

COLECAO = 'turmas'


class Turma(t.TypedDict):
    id: str
    nome: str
    # Rótulo livre da matéria lecionada (ex: "Matemática"); não referencia Disciplina
    disciplina: str
    escolaId: str
    alunoIds: list[str]
    createdAt: str
