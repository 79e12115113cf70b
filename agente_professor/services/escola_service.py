# agente_professor/services/escola_service.py

from flask import current_app

from ..extensions import record_store
from ..models import escola as escola_m, turma as turma_m, aluno as aluno_m
from .erros import ValidacaoError, RegistroEmUsoError
from .uniqueness import novo_id, agora_iso, campos_editaveis
from utils.normalizer import normalize_name


class EscolaService:
    @staticmethod
    def create_escola(nome: str):
        """Cria uma nova escola e a devolve."""
        nome = normalize_name(nome)
        if not nome:
            raise ValidacaoError("O nome da escola não pode estar vazio.")

        escola = {
            'id': novo_id(),
            'nome': nome,
            'createdAt': agora_iso(),
        }
        record_store.add(escola_m.COLECAO, escola)
        return escola

    @staticmethod
    def get_escolas():
        return record_store.get_all(escola_m.COLECAO)

    @staticmethod
    def get_escola(escola_id):
        return record_store.get_by_id(escola_m.COLECAO, escola_id)

    @staticmethod
    def update_escola(escola_id, campos: dict) -> bool:
        """Atualiza os dados de uma escola existente. Id inexistente: nada acontece."""
        campos = campos_editaveis(campos)
        if 'nome' in campos:
            campos['nome'] = normalize_name(campos['nome'])
            if not campos['nome']:
                raise ValidacaoError("O nome da escola não pode estar vazio.")
        return record_store.update(escola_m.COLECAO, escola_id, campos)

    @staticmethod
    def delete_escola(escola_id) -> None:
        """
        Exclui uma escola.
        A exclusão é recusada enquanto houver turmas cadastradas nela.
        """
        turmas = EscolaService._turmas_da_escola(escola_id)
        if turmas:
            raise RegistroEmUsoError(
                f"Não é possível excluir. Esta escola possui {len(turmas)} turma(s) cadastrada(s)."
            )
        record_store.delete(escola_m.COLECAO, escola_id)
        current_app.logger.info(f"Escola {escola_id} excluída.")

    @staticmethod
    def get_escola_stats(escola_id):
        """Totais do cartão da escola: turmas e alunos matriculados nelas."""
        turmas = EscolaService._turmas_da_escola(escola_id)
        alunos_existentes = {a['id'] for a in record_store.get_all(aluno_m.COLECAO)}
        # Aluno em duas turmas da mesma escola conta duas vezes
        alunos_count = sum(
            len([aid for aid in t.get('alunoIds') or [] if aid in alunos_existentes])
            for t in turmas
        )
        return {
            'turmasCount': len(turmas),
            'alunosCount': alunos_count,
        }

    @staticmethod
    def _turmas_da_escola(escola_id):
        return [t for t in record_store.get_all(turma_m.COLECAO) if t.get('escolaId') == escola_id]
