# agente_professor/services/calendario_service.py

import calendar
from datetime import date

from ..models.horario import DIAS_DA_SEMANA
from .datas import parse_data
from .erros import ValidacaoError
from .horario_service import HorarioService
from .turma_service import TurmaService


class CalendarioService:

    @staticmethod
    def build_month_grid(ano: int, mes: int) -> list:
        """
        Células da grade do mês com semanas começando no domingo:
        um None para cada dia antes do dia 1, depois 1..último dia.
        """
        if not 1 <= mes <= 12:
            raise ValidacaoError(f"Mês inválido: {mes}.")
        # monthrange usa segunda = 0; a grade usa domingo = 0
        primeiro_dia, total_dias = calendar.monthrange(ano, mes)
        vazios = (primeiro_dia + 1) % 7
        return [None] * vazios + list(range(1, total_dias + 1))

    @staticmethod
    def navigate_month(data, direcao: str) -> date:
        """
        Mesmo dia no mês anterior ('prev') ou seguinte ('next').
        Se o dia não existir no mês de destino, usa o último dia dele (31/01 -> 29/02).
        """
        atual = parse_data(data)
        if direcao == 'prev':
            delta = -1
        elif direcao == 'next':
            delta = 1
        else:
            raise ValidacaoError("Direção inválida. Use 'prev' ou 'next'.")

        indice = atual.year * 12 + (atual.month - 1) + delta
        ano, mes = divmod(indice, 12)
        mes += 1
        dia = min(atual.day, calendar.monthrange(ano, mes)[1])
        return date(ano, mes, dia)

    @staticmethod
    def get_horarios_agrupados_por_dia():
        """Grade semanal agrupada de segunda a domingo, cada dia ordenado pelo início."""
        horarios = HorarioService.get_horarios()
        return [
            {
                'value': dia,
                'label': label,
                'horarios': sorted(
                    (h for h in horarios if h.get('diaDaSemana') == dia),
                    key=lambda h: h['horaInicio'],
                ),
            }
            for dia, label in DIAS_DA_SEMANA.items()
        ]

    @staticmethod
    def get_aulas_do_dia(data):
        """
        Aulas da grade semanal na data, cada uma com sua turma.
        Horários cuja turma não existe mais são descartados.
        """
        turmas = {t['id']: t for t in TurmaService.get_turmas()}
        aulas = [
            {'horario': h, 'turma': turmas[h['turmaId']]}
            for h in HorarioService.get_horarios_by_data(data)
            if h.get('turmaId') in turmas
        ]
        return sorted(aulas, key=lambda a: a['horario']['horaInicio'])
