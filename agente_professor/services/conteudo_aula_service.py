# agente_professor/services/conteudo_aula_service.py

from ..extensions import record_store
from ..models import conteudo_aula as conteudo_m, turma as turma_m
from ..models.conteudo_aula import conteudo_aula_id
from .datas import data_iso
from .erros import ValidacaoError, RegistroNaoEncontradoError
from .uniqueness import agora_iso
from utils.validators import validate_data_uri


class ConteudoAulaService:
    @staticmethod
    def create_or_update_conteudo_aula(turma_id, data, conteudo: str, fotos_path=()):
        """Conteúdo ministrado e fotos do quadro: no máximo um registro por (turma, data)."""
        data = data_iso(data)
        fotos_path = list(fotos_path or [])
        if not all(validate_data_uri(f) for f in fotos_path):
            raise ValidacaoError('As fotos devem ser enviadas como data URI em base64.')
        if not record_store.get_by_id(turma_m.COLECAO, turma_id):
            raise RegistroNaoEncontradoError('Turma não encontrada.')

        id = conteudo_aula_id(turma_id, data)
        alteracoes = {'conteudo': conteudo or '', 'fotosPath': fotos_path}

        existente = ConteudoAulaService.get_conteudo_aula(id)
        if existente:
            record_store.update(conteudo_m.COLECAO, id, alteracoes)
            return {**existente, **alteracoes}

        conteudo_aula = {
            'id': id,
            'turmaId': turma_id,
            'data': data,
            **alteracoes,
            'createdAt': agora_iso(),
        }
        record_store.add(conteudo_m.COLECAO, conteudo_aula)
        return conteudo_aula

    @staticmethod
    def get_conteudos():
        return record_store.get_all(conteudo_m.COLECAO)

    @staticmethod
    def get_conteudo_aula(id):
        return record_store.get_by_id(conteudo_m.COLECAO, id)

    @staticmethod
    def get_conteudo_aula_by_turma_data(turma_id, data):
        return ConteudoAulaService.get_conteudo_aula(conteudo_aula_id(turma_id, data_iso(data)))
