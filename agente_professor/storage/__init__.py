# agente_professor/storage/__init__.py

from .backends import KeyValueStorage, MemoryStorage, SQLAlchemyStorage, build_storage
from .record_store import RecordStore

__all__ = [
    'KeyValueStorage',
    'MemoryStorage',
    'SQLAlchemyStorage',
    'build_storage',
    'RecordStore',
]
