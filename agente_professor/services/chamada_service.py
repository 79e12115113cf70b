# agente_professor/services/chamada_service.py

from ..extensions import record_store
from ..models import chamada as chamada_m, aluno as aluno_m, turma as turma_m
from ..models.chamada import chamada_id
from .datas import data_iso
from .erros import RegistroNaoEncontradoError
from .turma_service import TurmaService
from .uniqueness import agora_iso


class ChamadaService:
    @staticmethod
    def create_or_update_chamada(aluno_id, turma_id, data, presente: bool, observacao=None):
        """
        Registra a presença do aluno na aula da turma naquela data.

        O id é derivado de (aluno, turma, data), então chamar de novo para o
        mesmo trio sobrescreve presença e observação em vez de duplicar.
        Retorna o registro mesclado.
        """
        data = data_iso(data)
        if not record_store.get_by_id(turma_m.COLECAO, turma_id):
            raise RegistroNaoEncontradoError('Turma não encontrada.')
        if not record_store.get_by_id(aluno_m.COLECAO, aluno_id):
            raise RegistroNaoEncontradoError('Aluno não encontrado.')

        id = chamada_id(aluno_id, turma_id, data)
        alteracoes = {'presente': bool(presente), 'observacao': observacao or None}

        existente = ChamadaService.get_chamada(id)
        if existente:
            record_store.update(chamada_m.COLECAO, id, alteracoes)
            return {**existente, **alteracoes}

        chamada = {
            'id': id,
            'alunoId': aluno_id,
            'turmaId': turma_id,
            'data': data,
            **alteracoes,
            'createdAt': agora_iso(),
        }
        record_store.add(chamada_m.COLECAO, chamada)
        return chamada

    @staticmethod
    def get_chamadas():
        return record_store.get_all(chamada_m.COLECAO)

    @staticmethod
    def get_chamada(id):
        return record_store.get_by_id(chamada_m.COLECAO, id)

    @staticmethod
    def get_chamada_by_aluno_turma_data(aluno_id, turma_id, data):
        return ChamadaService.get_chamada(chamada_id(aluno_id, turma_id, data_iso(data)))

    @staticmethod
    def get_chamadas_by_turma_data(turma_id, data):
        data = data_iso(data)
        return [
            c for c in ChamadaService.get_chamadas()
            if c.get('turmaId') == turma_id and c.get('data') == data
        ]

    @staticmethod
    def get_resumo_chamada(turma_id, data):
        """
        Totais da chamada da turma na data, contando só os alunos matriculados.
        Aluno sem chamada lançada conta como ausente.
        """
        matriculados = {a['id'] for a in TurmaService.get_alunos_by_turma(turma_id)}
        presente = sum(
            1 for c in ChamadaService.get_chamadas_by_turma_data(turma_id, data)
            if c.get('alunoId') in matriculados and c.get('presente')
        )
        total = len(matriculados)
        return {'presente': presente, 'ausente': total - presente, 'total': total}
