# agente_professor/models/horario.py

import typing as t

COLECAO = 'horarios'

# 1 = segunda ... 7 = domingo
DIAS_DA_SEMANA = {
    1: 'Segunda-feira',
    2: 'Terça-feira',
    3: 'Quarta-feira',
    4: 'Quinta-feira',
    5: 'Sexta-feira',
    6: 'Sábado',
    7: 'Domingo',
}


class Horario(t.TypedDict):
    id: str
    turmaId: str
    diaDaSemana: int
    horaInicio: str  # "HH:MM"
    horaFim: str     # "HH:MM"
    createdAt: str
