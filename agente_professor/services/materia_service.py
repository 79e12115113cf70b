# agente_professor/services/materia_service.py

from ..extensions import record_store
from ..models import materia as materia_m, disciplina as disciplina_m
from .erros import ValidacaoError, RegistroNaoEncontradoError
from .uniqueness import novo_id, agora_iso, campos_editaveis
from utils.normalizer import normalize_name


class MateriaService:
    """Material de estudo da biblioteca, sempre dentro de uma disciplina."""

    @staticmethod
    def create_materia(nome: str, disciplina_id, arquivos_path=()):
        nome = normalize_name(nome)
        if not nome or not disciplina_id:
            raise ValidacaoError('Nome e Disciplina são obrigatórios.')
        if not record_store.get_by_id(disciplina_m.COLECAO, disciplina_id):
            raise RegistroNaoEncontradoError('Disciplina não encontrada.')

        materia = {
            'id': novo_id(),
            'nome': nome,
            'disciplinaId': disciplina_id,
            'arquivosPath': list(arquivos_path or []),
            'createdAt': agora_iso(),
        }
        record_store.add(materia_m.COLECAO, materia)
        return materia

    @staticmethod
    def get_materias():
        return record_store.get_all(materia_m.COLECAO)

    @staticmethod
    def get_materia(materia_id):
        return record_store.get_by_id(materia_m.COLECAO, materia_id)

    @staticmethod
    def get_materias_by_disciplina(disciplina_id):
        return [m for m in MateriaService.get_materias() if m.get('disciplinaId') == disciplina_id]

    @staticmethod
    def update_materia(materia_id, campos: dict) -> bool:
        campos = campos_editaveis(campos)
        if 'nome' in campos:
            campos['nome'] = normalize_name(campos['nome'])
            if not campos['nome']:
                raise ValidacaoError('O nome da matéria não pode estar vazio.')
        if 'disciplinaId' in campos and not record_store.get_by_id(disciplina_m.COLECAO, campos['disciplinaId']):
            raise RegistroNaoEncontradoError('Disciplina não encontrada.')
        if 'arquivosPath' in campos:
            campos['arquivosPath'] = list(campos['arquivosPath'] or [])
        return record_store.update(materia_m.COLECAO, materia_id, campos)

    @staticmethod
    def delete_materia(materia_id) -> None:
        record_store.delete(materia_m.COLECAO, materia_id)
