# agente_professor/services/uniqueness.py
import uuid
from datetime import datetime, timezone


def novo_id() -> str:
    """Id opaco de registro (UUID versão 4)."""
    return str(uuid.uuid4())


def agora_iso() -> str:
    """Timestamp ISO-8601 em UTC para o campo createdAt."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def campos_editaveis(campos) -> dict:
    """Remove id e createdAt de uma atualização: nunca mudam depois da criação."""
    return {k: v for k, v in dict(campos).items() if k not in ('id', 'createdAt')}
