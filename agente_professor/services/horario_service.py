# agente_professor/services/horario_service.py

from ..extensions import record_store
from ..models import horario as horario_m, turma as turma_m
from .datas import dia_da_semana
from .erros import ValidacaoError, RegistroNaoEncontradoError
from .uniqueness import novo_id, agora_iso, campos_editaveis
from utils.validators import validate_dia_semana, validate_intervalo


class HorarioService:
    """Grade semanal: cada horário se repete toda semana no mesmo dia."""

    @staticmethod
    def _validar(turma_id, dia, hora_inicio, hora_fim):
        if not turma_id:
            raise ValidacaoError('A turma é obrigatória.')
        if not validate_dia_semana(dia):
            raise ValidacaoError('Dia da semana inválido. Use 1 (segunda) a 7 (domingo).')
        ok, mensagem = validate_intervalo(hora_inicio, hora_fim)
        if not ok:
            raise ValidacaoError(mensagem)
        if not record_store.get_by_id(turma_m.COLECAO, turma_id):
            raise RegistroNaoEncontradoError('Turma não encontrada.')

    @staticmethod
    def create_horario(turma_id, dia_da_semana: int, hora_inicio: str, hora_fim: str):
        HorarioService._validar(turma_id, dia_da_semana, hora_inicio, hora_fim)

        horario = {
            'id': novo_id(),
            'turmaId': turma_id,
            'diaDaSemana': dia_da_semana,
            'horaInicio': hora_inicio,
            'horaFim': hora_fim,
            'createdAt': agora_iso(),
        }
        record_store.add(horario_m.COLECAO, horario)
        return horario

    @staticmethod
    def get_horarios():
        return record_store.get_all(horario_m.COLECAO)

    @staticmethod
    def get_horario(horario_id):
        return record_store.get_by_id(horario_m.COLECAO, horario_id)

    @staticmethod
    def update_horario(horario_id, campos: dict) -> bool:
        atual = HorarioService.get_horario(horario_id)
        if not atual:
            return False

        campos = campos_editaveis(campos)
        # Valida o resultado da mescla, não só os campos enviados
        novo = {**atual, **campos}
        HorarioService._validar(novo['turmaId'], novo['diaDaSemana'], novo['horaInicio'], novo['horaFim'])
        return record_store.update(horario_m.COLECAO, horario_id, campos)

    @staticmethod
    def delete_horario(horario_id) -> None:
        record_store.delete(horario_m.COLECAO, horario_id)

    @staticmethod
    def get_horarios_by_data(data):
        """
        Horários da grade semanal que caem no dia da semana de 'data'.
        Não inclui aulas avulsas marcadas para essa data; para elas use
        AulaAvulsaService.get_aulas_avulsas_by_data.
        """
        dia = dia_da_semana(data)
        return [h for h in HorarioService.get_horarios() if h.get('diaDaSemana') == dia]
