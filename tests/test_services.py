# tests/test_services.py

import uuid

import pytest
from agente_professor.services.escola_service import EscolaService
from agente_professor.services.turma_service import TurmaService
from agente_professor.services.aluno_service import AlunoService
from agente_professor.services.horario_service import HorarioService
from agente_professor.services.aula_avulsa_service import AulaAvulsaService
from agente_professor.services.erros import (
    ValidacaoError,
    RegistroNaoEncontradoError,
    RegistroEmUsoError,
)

FOTO = 'data:image/png;base64,iVBORw0KGgo='


class TestEscolaService:
    """
    Suíte de testes para o EscolaService.
    """

    def test_create_escola(self, test_app):
        escola = EscolaService.create_escola("  Escola   Estadual A ")

        assert escola['nome'] == 'Escola Estadual A'
        assert uuid.UUID(escola['id']).version == 4
        assert escola['createdAt'].endswith('Z')
        assert EscolaService.get_escola(escola['id']) == escola

    def test_create_escola_sem_nome(self, test_app):
        with pytest.raises(ValidacaoError):
            EscolaService.create_escola("   ")
        assert EscolaService.get_escolas() == []

    def test_update_escola_preserva_id_e_created_at(self, test_app):
        escola = EscolaService.create_escola("Escola A")

        EscolaService.update_escola(escola['id'], {'nome': 'Escola B', 'id': 'outro', 'createdAt': 'ontem'})

        atualizada = EscolaService.get_escola(escola['id'])
        assert atualizada['nome'] == 'Escola B'
        assert atualizada['createdAt'] == escola['createdAt']

    def test_delete_escola_com_turmas_e_recusado(self, test_app, setup_escola_com_alunos):
        escola, _, _ = setup_escola_com_alunos

        with pytest.raises(RegistroEmUsoError, match="possui 1 turma"):
            EscolaService.delete_escola(escola['id'])
        assert EscolaService.get_escola(escola['id']) is not None

    def test_delete_escola_sem_turmas(self, test_app):
        escola = EscolaService.create_escola("Escola Vazia")
        EscolaService.delete_escola(escola['id'])
        assert EscolaService.get_escola(escola['id']) is None

    def test_get_escola_stats(self, test_app, setup_escola_com_alunos):
        escola, _, _ = setup_escola_com_alunos
        TurmaService.create_turma("3B", "Física", escola['id'])

        assert EscolaService.get_escola_stats(escola['id']) == {'turmasCount': 2, 'alunosCount': 2}


class TestTurmaService:
    """
    Suíte de testes para o TurmaService.
    """

    def test_create_turma_comeca_sem_alunos(self, test_app):
        escola = EscolaService.create_escola("Escola A")

        TurmaService.create_turma("3A", "Matemática", escola['id'])

        turmas = TurmaService.get_turmas()
        assert len(turmas) == 1
        assert turmas[0]['escolaId'] == escola['id']
        assert turmas[0]['alunoIds'] == []
        assert turmas[0]['disciplina'] == 'Matemática'

    def test_create_turma_em_escola_inexistente(self, test_app):
        with pytest.raises(RegistroNaoEncontradoError):
            TurmaService.create_turma("3A", "Matemática", "escola-fantasma")

    def test_create_turma_campos_obrigatorios(self, test_app):
        escola = EscolaService.create_escola("Escola A")
        with pytest.raises(ValidacaoError):
            TurmaService.create_turma("3A", "", escola['id'])

    def test_get_turmas_by_escola(self, test_app, setup_escola_com_alunos):
        escola, turma, _ = setup_escola_com_alunos
        outra = EscolaService.create_escola("Outra Escola")
        TurmaService.create_turma("1A", "Português", outra['id'])

        assert [t['id'] for t in TurmaService.get_turmas_by_escola(escola['id'])] == [turma['id']]
        assert TurmaService.get_turmas_by_escola(None) == []

    def test_add_aluno_to_turma_e_idempotente(self, test_app, setup_escola_com_alunos):
        _, turma, alunos = setup_escola_com_alunos

        TurmaService.add_aluno_to_turma(turma['id'], alunos[0]['id'])
        TurmaService.add_aluno_to_turma(turma['id'], alunos[0]['id'])

        alunos_ids = TurmaService.get_turma(turma['id'])['alunoIds']
        assert alunos_ids.count(alunos[0]['id']) == 1
        assert len(alunos_ids) == 2

    def test_remove_aluno_from_turma(self, test_app, setup_escola_com_alunos):
        _, turma, alunos = setup_escola_com_alunos

        TurmaService.remove_aluno_from_turma(turma['id'], alunos[0]['id'])

        assert TurmaService.get_turma(turma['id'])['alunoIds'] == [alunos[1]['id']]
        # O aluno continua cadastrado
        assert AlunoService.get_aluno(alunos[0]['id']) is not None

    def test_get_alunos_by_turma(self, test_app, setup_escola_com_alunos):
        _, turma, alunos = setup_escola_com_alunos
        AlunoService.create_aluno("Fora da Turma")

        assert TurmaService.get_alunos_by_turma(turma['id']) == alunos
        assert TurmaService.get_alunos_by_turma('turma-fantasma') == []

    def test_get_alunos_disponiveis(self, test_app, setup_escola_com_alunos):
        _, turma, alunos = setup_escola_com_alunos
        fora = AlunoService.create_aluno("Fora da Turma")

        assert TurmaService.get_alunos_disponiveis(turma['id']) == [fora]

        TurmaService.remove_aluno_from_turma(turma['id'], alunos[1]['id'])
        assert TurmaService.get_alunos_disponiveis(turma['id']) == [alunos[1], fora]
        assert TurmaService.get_alunos_disponiveis('turma-fantasma') == []

    def test_update_turma_remove_duplicados(self, test_app, setup_escola_com_alunos):
        _, turma, alunos = setup_escola_com_alunos
        a1 = alunos[0]['id']

        TurmaService.update_turma(turma['id'], {'alunoIds': [a1, a1]})

        assert TurmaService.get_turma(turma['id'])['alunoIds'] == [a1]

    def test_delete_turma_remove_horarios_e_aulas_avulsas(self, test_app, setup_escola_com_alunos):
        escola, turma, _ = setup_escola_com_alunos
        outra = TurmaService.create_turma("3B", "Física", escola['id'])
        HorarioService.create_horario(turma['id'], 1, "08:00", "09:00")
        mantido = HorarioService.create_horario(outra['id'], 1, "09:00", "10:00")
        AulaAvulsaService.create_aula_avulsa(turma['id'], "2024-06-15", "10:00", "11:00")

        TurmaService.delete_turma(turma['id'])

        assert TurmaService.get_turma(turma['id']) is None
        assert HorarioService.get_horarios() == [mantido]
        assert AulaAvulsaService.get_aulas_avulsas() == []


class TestAlunoService:
    """
    Suíte de testes para o AlunoService.
    """

    def test_create_aluno_com_foto(self, test_app):
        aluno = AlunoService.create_aluno("Carla Dias", FOTO)

        assert AlunoService.get_aluno(aluno['id']) == {
            'id': aluno['id'],
            'nome': 'Carla Dias',
            'fotoPath': FOTO,
            'createdAt': aluno['createdAt'],
        }

    def test_create_aluno_foto_invalida(self, test_app):
        with pytest.raises(ValidacaoError):
            AlunoService.create_aluno("Carla Dias", "/tmp/foto.png")

    def test_delete_aluno_desmatricula_de_todas_as_turmas(self, test_app, setup_escola_com_alunos):
        escola, turma, alunos = setup_escola_com_alunos
        outra = TurmaService.create_turma("3B", "Física", escola['id'])
        TurmaService.add_aluno_to_turma(outra['id'], alunos[0]['id'])

        AlunoService.delete_aluno(alunos[0]['id'])

        assert AlunoService.get_aluno(alunos[0]['id']) is None
        assert TurmaService.get_turma(turma['id'])['alunoIds'] == [alunos[1]['id']]
        assert TurmaService.get_turma(outra['id'])['alunoIds'] == []

    def test_importar_alunos(self, test_app, setup_escola_com_alunos):
        _, turma, _ = setup_escola_com_alunos

        criados = AlunoService.importar_alunos(turma['id'], "Diego Alves\n\n   \n  Eva Rocha  \n")

        assert [a['nome'] for a in criados] == ['Diego Alves', 'Eva Rocha']
        assert len(TurmaService.get_alunos_by_turma(turma['id'])) == 4

    def test_importar_alunos_texto_vazio(self, test_app, setup_escola_com_alunos):
        _, turma, _ = setup_escola_com_alunos
        with pytest.raises(ValidacaoError, match="Nenhum nome"):
            AlunoService.importar_alunos(turma['id'], "\n \n")


class TestHorarioService:
    """
    Suíte de testes para o HorarioService e AulaAvulsaService.
    """

    def test_create_horario(self, test_app, setup_escola_com_alunos):
        _, turma, _ = setup_escola_com_alunos

        horario = HorarioService.create_horario(turma['id'], 3, "07:30", "08:20")

        assert HorarioService.get_horario(horario['id'])['diaDaSemana'] == 3
        assert horario['horaInicio'] == "07:30"

    @pytest.mark.parametrize("dia, inicio, fim", [
        (0, "08:00", "09:00"),
        (8, "08:00", "09:00"),
        (1, "8h", "09:00"),
        (1, "10:00", "09:00"),
        (1, "09:00", "09:00"),
    ])
    def test_create_horario_invalido(self, test_app, setup_escola_com_alunos, dia, inicio, fim):
        _, turma, _ = setup_escola_com_alunos
        with pytest.raises(ValidacaoError):
            HorarioService.create_horario(turma['id'], dia, inicio, fim)

    def test_update_horario_valida_o_resultado(self, test_app, setup_escola_com_alunos):
        _, turma, _ = setup_escola_com_alunos
        horario = HorarioService.create_horario(turma['id'], 1, "08:00", "09:00")

        with pytest.raises(ValidacaoError):
            HorarioService.update_horario(horario['id'], {'horaFim': "07:00"})

        assert HorarioService.update_horario(horario['id'], {'horaFim': "09:30"}) is True
        assert HorarioService.get_horario(horario['id'])['horaFim'] == "09:30"
        assert HorarioService.update_horario('nao-existe', {'horaFim': "09:30"}) is False

    def test_get_horarios_by_data_domingo(self, test_app, setup_escola_com_alunos):
        _, turma, _ = setup_escola_com_alunos
        domingo = HorarioService.create_horario(turma['id'], 7, "10:00", "11:00")
        HorarioService.create_horario(turma['id'], 1, "10:00", "11:00")
        HorarioService.create_horario(turma['id'], 6, "10:00", "11:00")

        # 09/06/2024 foi um domingo
        assert HorarioService.get_horarios_by_data("2024-06-09") == [domingo]

    def test_get_horarios_by_data_ignora_aulas_avulsas(self, test_app, setup_escola_com_alunos):
        _, turma, _ = setup_escola_com_alunos
        aula = AulaAvulsaService.create_aula_avulsa(turma['id'], "2024-06-10", "14:00", "15:00")

        assert HorarioService.get_horarios_by_data("2024-06-10") == []
        assert AulaAvulsaService.get_aulas_avulsas_by_data("2024-06-10") == [aula]

    def test_aula_avulsa_data_invalida(self, test_app, setup_escola_com_alunos):
        _, turma, _ = setup_escola_com_alunos
        with pytest.raises(ValidacaoError):
            AulaAvulsaService.create_aula_avulsa(turma['id'], "10/06/2024", "14:00", "15:00")

    def test_update_e_delete_aula_avulsa(self, test_app, setup_escola_com_alunos):
        _, turma, _ = setup_escola_com_alunos
        aula = AulaAvulsaService.create_aula_avulsa(turma['id'], "2024-06-10", "14:00", "15:00")

        AulaAvulsaService.update_aula_avulsa(aula['id'], {'data': "2024-06-11"})
        assert AulaAvulsaService.get_aulas_avulsas_by_data("2024-06-11")[0]['id'] == aula['id']

        AulaAvulsaService.delete_aula_avulsa(aula['id'])
        assert AulaAvulsaService.get_aula_avulsa(aula['id']) is None
