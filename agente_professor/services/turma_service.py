# agente_professor/services/turma_service.py

from flask import current_app

from ..extensions import record_store
from ..models import (
    turma as turma_m,
    escola as escola_m,
    aluno as aluno_m,
    horario as horario_m,
    aula_avulsa as aula_avulsa_m,
)
from .erros import ValidacaoError, RegistroNaoEncontradoError
from .uniqueness import novo_id, agora_iso, campos_editaveis
from utils.normalizer import normalize_name


class TurmaService:
    @staticmethod
    def create_turma(nome: str, disciplina: str, escola_id: str):
        """Cria uma turma vazia (sem alunos) numa escola existente."""
        nome = normalize_name(nome)
        disciplina = normalize_name(disciplina)

        if not all([nome, disciplina, escola_id]):
            raise ValidacaoError('Nome, Disciplina e Escola são obrigatórios.')

        if not record_store.get_by_id(escola_m.COLECAO, escola_id):
            raise RegistroNaoEncontradoError('Escola não encontrada.')

        turma = {
            'id': novo_id(),
            'nome': nome,
            'disciplina': disciplina,
            'escolaId': escola_id,
            'alunoIds': [],
            'createdAt': agora_iso(),
        }
        record_store.add(turma_m.COLECAO, turma)
        return turma

    @staticmethod
    def get_turmas():
        return record_store.get_all(turma_m.COLECAO)

    @staticmethod
    def get_turma(turma_id):
        return record_store.get_by_id(turma_m.COLECAO, turma_id)

    @staticmethod
    def get_turmas_by_escola(escola_id):
        if not escola_id:
            return []
        return [t for t in TurmaService.get_turmas() if t.get('escolaId') == escola_id]

    @staticmethod
    def update_turma(turma_id, campos: dict) -> bool:
        """Atualiza os dados de uma turma. Id inexistente: nada acontece."""
        campos = campos_editaveis(campos)

        for campo in ('nome', 'disciplina'):
            if campo in campos:
                campos[campo] = normalize_name(campos[campo])
                if not campos[campo]:
                    raise ValidacaoError('Nome e Disciplina da turma são obrigatórios.')

        if 'escolaId' in campos and not record_store.get_by_id(escola_m.COLECAO, campos['escolaId']):
            raise RegistroNaoEncontradoError('Escola não encontrada.')

        if 'alunoIds' in campos:
            # Remove duplicados preservando a ordem de matrícula
            campos['alunoIds'] = list(dict.fromkeys(campos['alunoIds'] or []))

        return record_store.update(turma_m.COLECAO, turma_id, campos)

    @staticmethod
    def delete_turma(turma_id) -> None:
        """
        Exclui a turma junto com seus horários semanais e aulas avulsas.
        Chamadas e conteúdos já lançados ficam no histórico.
        """
        horarios = [h for h in record_store.get_all(horario_m.COLECAO) if h.get('turmaId') == turma_id]
        for horario in horarios:
            record_store.delete(horario_m.COLECAO, horario['id'])

        avulsas = [a for a in record_store.get_all(aula_avulsa_m.COLECAO) if a.get('turmaId') == turma_id]
        for aula in avulsas:
            record_store.delete(aula_avulsa_m.COLECAO, aula['id'])

        record_store.delete(turma_m.COLECAO, turma_id)
        current_app.logger.info(
            f"Turma {turma_id} excluída com {len(horarios)} horário(s) e {len(avulsas)} aula(s) avulsa(s)."
        )

    # --- MATRÍCULAS ---

    @staticmethod
    def add_aluno_to_turma(turma_id, aluno_id) -> None:
        """Matricula o aluno na turma. Chamar de novo com o mesmo par não duplica."""
        turma = TurmaService.get_turma(turma_id)
        if turma and aluno_id not in turma['alunoIds']:
            record_store.update(turma_m.COLECAO, turma_id, {'alunoIds': turma['alunoIds'] + [aluno_id]})

    @staticmethod
    def remove_aluno_from_turma(turma_id, aluno_id) -> None:
        turma = TurmaService.get_turma(turma_id)
        if turma:
            alunos_ids = [aid for aid in turma['alunoIds'] if aid != aluno_id]
            record_store.update(turma_m.COLECAO, turma_id, {'alunoIds': alunos_ids})

    @staticmethod
    def get_alunos_by_turma(turma_id):
        """Alunos matriculados, na ordem do cadastro de alunos. Turma inexistente: lista vazia."""
        turma = TurmaService.get_turma(turma_id)
        if not turma:
            return []

        alunos_ids = set(turma['alunoIds'])
        return [a for a in record_store.get_all(aluno_m.COLECAO) if a['id'] in alunos_ids]

    @staticmethod
    def get_alunos_disponiveis(turma_id):
        """Alunos cadastrados que ainda não estão na turma. Turma inexistente: lista vazia."""
        turma = TurmaService.get_turma(turma_id)
        if not turma:
            return []

        alunos_ids = set(turma['alunoIds'])
        return [a for a in record_store.get_all(aluno_m.COLECAO) if a['id'] not in alunos_ids]
