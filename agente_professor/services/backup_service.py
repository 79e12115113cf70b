# agente_professor/services/backup_service.py

from datetime import datetime

from flask import current_app

from ..extensions import record_store
from .erros import BackupInvalidoError


class BackupService:
    @staticmethod
    def export_backup() -> str:
        """Documento JSON com todas as coleções e a data da exportação."""
        return record_store.export_snapshot()

    @staticmethod
    def backup_filename() -> str:
        return f"backup_agente_professor_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"

    @staticmethod
    def import_backup(blob):
        """
        Restaura um backup, substituindo TODOS os dados atuais.
        Documento inválido não altera nada e devolve (False, motivo).
        Falhas do armazenamento não são erro do documento: sobem para quem chamou.
        """
        try:
            importados = record_store.import_snapshot(blob)
        except BackupInvalidoError as e:
            current_app.logger.warning(f"Backup rejeitado: {e}")
            return False, str(e)

        total = sum(importados.values())
        current_app.logger.info(f"Backup restaurado: {importados}")
        return True, f"Backup restaurado com sucesso. {total} registro(s) importado(s)."

    @staticmethod
    def clear_data() -> int:
        """Apaga todas as coleções do agente. Retorna quantas chaves foram removidas."""
        removidas = record_store.clear()
        current_app.logger.info(f"Dados apagados: {removidas} coleção(ões) removida(s).")
        return removidas
