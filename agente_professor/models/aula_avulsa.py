# agente_professor/models/aula_avulsa.py

import typing as t

COLECAO = 'aulas_avulsas'


class AulaAvulsa(t.TypedDict):
    """Aula fora da grade semanal, presa a uma única data."""
    id: str
    turmaId: str
    data: str  # "YYYY-MM-DD"
    horaInicio: str
    horaFim: str
    createdAt: str
