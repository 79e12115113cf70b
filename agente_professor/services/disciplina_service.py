# agente_professor/services/disciplina_service.py

from flask import current_app

from ..extensions import record_store
from ..models import disciplina as disciplina_m, materia as materia_m
from .erros import ValidacaoError
from .uniqueness import novo_id, agora_iso, campos_editaveis
from utils.normalizer import normalize_name


class DisciplinaService:

    # --- MÉTODOS DE CONSULTA ---
    @staticmethod
    def get_disciplinas():
        return record_store.get_all(disciplina_m.COLECAO)

    @staticmethod
    def get_disciplina(disciplina_id):
        return record_store.get_by_id(disciplina_m.COLECAO, disciplina_id)

    # --- MÉTODOS DE ESCRITA (CRUD) ---
    @staticmethod
    def create_disciplina(nome: str):
        nome = normalize_name(nome)
        if not nome:
            raise ValidacaoError('O nome da disciplina não pode estar vazio.')

        disciplina = {
            'id': novo_id(),
            'nome': nome,
            'createdAt': agora_iso(),
        }
        record_store.add(disciplina_m.COLECAO, disciplina)
        return disciplina

    @staticmethod
    def update_disciplina(disciplina_id, campos: dict) -> bool:
        campos = campos_editaveis(campos)
        if 'nome' in campos:
            campos['nome'] = normalize_name(campos['nome'])
            if not campos['nome']:
                raise ValidacaoError('O nome da disciplina não pode estar vazio.')
        return record_store.update(disciplina_m.COLECAO, disciplina_id, campos)

    @staticmethod
    def delete_disciplina(disciplina_id) -> int:
        """
        Exclui a disciplina e, em cascata, todas as suas matérias.
        Retorna quantas matérias foram removidas.
        """
        materias = [m for m in record_store.get_all(materia_m.COLECAO) if m.get('disciplinaId') == disciplina_id]
        for materia in materias:
            record_store.delete(materia_m.COLECAO, materia['id'])
        record_store.delete(disciplina_m.COLECAO, disciplina_id)

        current_app.logger.info(f"Disciplina {disciplina_id} excluída com {len(materias)} matéria(s).")
        return len(materias)
