# agente_professor/services/aluno_service.py

from flask import current_app

from ..extensions import record_store
from ..models import aluno as aluno_m, turma as turma_m
from .erros import ValidacaoError, RegistroNaoEncontradoError
from .turma_service import TurmaService
from .uniqueness import novo_id, agora_iso, campos_editaveis
from utils.normalizer import normalize_name, split_nomes
from utils.validators import validate_data_uri


class AlunoService:
    @staticmethod
    def create_aluno(nome: str, foto_path=None):
        """
        Cadastra um aluno. A foto, quando houver, já deve vir redimensionada
        e convertida em data URI pela camada de apresentação.
        """
        nome = normalize_name(nome)
        if not nome:
            raise ValidacaoError('O nome do aluno não pode estar vazio.')
        if foto_path is not None and not validate_data_uri(foto_path):
            raise ValidacaoError('A foto deve ser enviada como data URI em base64.')

        aluno = {
            'id': novo_id(),
            'nome': nome,
            'createdAt': agora_iso(),
        }
        if foto_path is not None:
            aluno['fotoPath'] = foto_path
        record_store.add(aluno_m.COLECAO, aluno)
        return aluno

    @staticmethod
    def get_alunos():
        return record_store.get_all(aluno_m.COLECAO)

    @staticmethod
    def get_aluno(aluno_id):
        return record_store.get_by_id(aluno_m.COLECAO, aluno_id)

    @staticmethod
    def update_aluno(aluno_id, campos: dict) -> bool:
        campos = campos_editaveis(campos)
        if 'nome' in campos:
            campos['nome'] = normalize_name(campos['nome'])
            if not campos['nome']:
                raise ValidacaoError('O nome do aluno não pode estar vazio.')
        if campos.get('fotoPath') is not None and not validate_data_uri(campos['fotoPath']):
            raise ValidacaoError('A foto deve ser enviada como data URI em base64.')
        return record_store.update(aluno_m.COLECAO, aluno_id, campos)

    @staticmethod
    def delete_aluno(aluno_id) -> None:
        """Exclui o aluno e o desmatricula de todas as turmas."""
        turmas = [t for t in record_store.get_all(turma_m.COLECAO) if aluno_id in (t.get('alunoIds') or [])]
        for turma in turmas:
            TurmaService.remove_aluno_from_turma(turma['id'], aluno_id)
        record_store.delete(aluno_m.COLECAO, aluno_id)

    @staticmethod
    def importar_alunos(turma_id, texto: str):
        """
        Cadastra e matricula na turma um aluno por linha de 'texto'.
        Linhas em branco são ignoradas. Retorna os alunos criados.
        """
        if not TurmaService.get_turma(turma_id):
            raise RegistroNaoEncontradoError('Turma não encontrada.')

        nomes = split_nomes(texto)
        if not nomes:
            raise ValidacaoError('Nenhum nome válido encontrado.')

        criados = []
        for nome in nomes:
            aluno = AlunoService.create_aluno(nome)
            TurmaService.add_aluno_to_turma(turma_id, aluno['id'])
            criados.append(aluno)

        current_app.logger.info(f"{len(criados)} aluno(s) importado(s) na turma {turma_id}.")
        return criados
