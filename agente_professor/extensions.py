# agente_professor/extensions.py

from .storage.record_store import RecordStore

# --- ARMAZENAMENTO DE REGISTROS ---
# Instância única; o backend concreto é escolhido em init_app a partir da config.
record_store = RecordStore()
