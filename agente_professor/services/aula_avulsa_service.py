# agente_professor/services/aula_avulsa_service.py

from ..extensions import record_store
from ..models import aula_avulsa as aula_avulsa_m, turma as turma_m
from .datas import data_iso
from .erros import ValidacaoError, RegistroNaoEncontradoError
from .uniqueness import novo_id, agora_iso, campos_editaveis
from utils.validators import validate_intervalo


class AulaAvulsaService:
    @staticmethod
    def _validar(turma_id, hora_inicio, hora_fim):
        if not turma_id:
            raise ValidacaoError('A turma é obrigatória.')
        ok, mensagem = validate_intervalo(hora_inicio, hora_fim)
        if not ok:
            raise ValidacaoError(mensagem)
        if not record_store.get_by_id(turma_m.COLECAO, turma_id):
            raise RegistroNaoEncontradoError('Turma não encontrada.')

    @staticmethod
    def create_aula_avulsa(turma_id, data, hora_inicio: str, hora_fim: str):
        """Agenda uma aula fora da grade semanal para uma data específica."""
        data = data_iso(data)
        AulaAvulsaService._validar(turma_id, hora_inicio, hora_fim)

        aula = {
            'id': novo_id(),
            'turmaId': turma_id,
            'data': data,
            'horaInicio': hora_inicio,
            'horaFim': hora_fim,
            'createdAt': agora_iso(),
        }
        record_store.add(aula_avulsa_m.COLECAO, aula)
        return aula

    @staticmethod
    def get_aulas_avulsas():
        return record_store.get_all(aula_avulsa_m.COLECAO)

    @staticmethod
    def get_aula_avulsa(aula_id):
        return record_store.get_by_id(aula_avulsa_m.COLECAO, aula_id)

    @staticmethod
    def update_aula_avulsa(aula_id, campos: dict) -> bool:
        atual = AulaAvulsaService.get_aula_avulsa(aula_id)
        if not atual:
            return False

        campos = campos_editaveis(campos)
        if 'data' in campos:
            campos['data'] = data_iso(campos['data'])
        novo = {**atual, **campos}
        AulaAvulsaService._validar(novo['turmaId'], novo['horaInicio'], novo['horaFim'])
        return record_store.update(aula_avulsa_m.COLECAO, aula_id, campos)

    @staticmethod
    def delete_aula_avulsa(aula_id) -> None:
        record_store.delete(aula_avulsa_m.COLECAO, aula_id)

    @staticmethod
    def get_aulas_avulsas_by_data(data):
        data = data_iso(data)
        return sorted(
            (a for a in AulaAvulsaService.get_aulas_avulsas() if a.get('data') == data),
            key=lambda a: a['horaInicio'],
        )
