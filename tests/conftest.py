# tests/conftest.py

import pytest
from agente_professor.app import create_app
from agente_professor.config import Config
from agente_professor.extensions import record_store
from agente_professor.models.database import db as _db
from agente_professor.services.escola_service import EscolaService
from agente_professor.services.turma_service import TurmaService
from agente_professor.services.aluno_service import AlunoService


class TestingConfig(Config):
    """Configuração dedicada para o ambiente de testes."""
    TESTING = True
    SECRET_KEY = "uma-chave-secreta-para-testes"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    STORAGE_BACKEND = "memory"
    STORAGE_PREFIX = "teacher_agent_"


class SQLAlchemyTestingConfig(TestingConfig):
    STORAGE_BACKEND = "sqlalchemy"


@pytest.fixture(scope='function', params=[TestingConfig, SQLAlchemyTestingConfig], ids=['memory', 'sqlalchemy'])
def test_app(request):
    """Cria o app para cada teste, uma vez com cada backend de armazenamento."""
    app = create_app(config_class=request.param)
    with app.app_context():
        _db.create_all()
        yield app
        record_store.teardown(app)
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope='function')
def test_client(test_app):
    """Cria um cliente de teste para simular requisições HTTP."""
    return test_app.test_client()


@pytest.fixture(scope='function')
def cli_runner(test_app):
    return test_app.test_cli_runner()


@pytest.fixture(scope='function')
def setup_escola_com_alunos(test_app):
    """
    Cria uma escola, uma turma nela e dois alunos matriculados
    para usar como base em outros testes de serviço.
    """
    escola = EscolaService.create_escola("Escola de Testes Base")
    turma = TurmaService.create_turma("3A", "Matemática", escola['id'])

    aluno1 = AlunoService.create_aluno("Ana Souza")
    aluno2 = AlunoService.create_aluno("Bruno Lima")
    TurmaService.add_aluno_to_turma(turma['id'], aluno1['id'])
    TurmaService.add_aluno_to_turma(turma['id'], aluno2['id'])

    return escola, TurmaService.get_turma(turma['id']), [aluno1, aluno2]
