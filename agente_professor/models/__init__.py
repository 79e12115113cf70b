# agente_professor/models/__init__.py

from .database import db

from .storage_entry import StorageEntry
from .escola import Escola
from .turma import Turma
from .aluno import Aluno
from .horario import Horario
from .aula_avulsa import AulaAvulsa
from .chamada import Chamada
from .conteudo_aula import ConteudoAula
from .disciplina import Disciplina
from .materia import Materia

from . import escola, turma, aluno, horario, aula_avulsa, chamada, conteudo_aula, disciplina, materia

# Ordem das coleções no backup exportado
COLECOES = (
    escola.COLECAO,
    turma.COLECAO,
    aluno.COLECAO,
    horario.COLECAO,
    aula_avulsa.COLECAO,
    chamada.COLECAO,
    conteudo_aula.COLECAO,
    disciplina.COLECAO,
    materia.COLECAO,
)

__all__ = [
    'db',
    'StorageEntry',
    'Escola',
    'Turma',
    'Aluno',
    'Horario',
    'AulaAvulsa',
    'Chamada',
    'ConteudoAula',
    'Disciplina',
    'Materia',
    'COLECOES',
]
