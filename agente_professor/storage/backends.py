# agente_professor/storage/backends.py
"""
Espaços chave-valor onde o RecordStore persiste as coleções.

Ambos expõem a mesma interface mínima (get_item / set_item / remove_item / keys)
e os ganchos open / close chamados pela extensão no início e no fim do app.
"""

import typing as t

from flask import current_app
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from ..models.database import db
from ..models.storage_entry import StorageEntry


class KeyValueStorage:
    """Interface dos backends. Valores são sempre strings já serializadas."""

    def open(self) -> None:
        pass

    def close(self) -> None:
        pass

    def get_item(self, key: str) -> t.Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> list[str]:
        raise NotImplementedError

    def replace_prefix(self, prefix: str, itens: t.Mapping[str, str]) -> None:
        """Apaga todas as chaves com 'prefix' e grava 'itens' numa única operação."""
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):
    """Backend em memória, usado nos testes. Não sobrevive ao processo."""

    def __init__(self, initial: t.Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def close(self) -> None:
        self._data.clear()

    def get_item(self, key):
        return self._data.get(key)

    def set_item(self, key, value):
        self._data[key] = value

    def remove_item(self, key):
        self._data.pop(key, None)

    def keys(self):
        return list(self._data)

    def replace_prefix(self, prefix, itens):
        novo = {k: v for k, v in self._data.items() if not k.startswith(prefix)}
        novo.update(itens)
        self._data = novo


class SQLAlchemyStorage(KeyValueStorage):
    """
    Uma linha da tabela storage_entries por chave.
    Cada escrita faz commit próprio; em caso de falha faz rollback e relança o erro.
    """

    def open(self) -> None:
        # Garante a tabela em bancos novos (SQLite local); em produção o Flask-Migrate cuida do schema
        StorageEntry.__table__.create(bind=db.engine, checkfirst=True)

    def close(self) -> None:
        db.session.remove()

    def get_item(self, key):
        return db.session.scalar(select(StorageEntry.value).where(StorageEntry.key == key))

    def set_item(self, key, value):
        try:
            entry = db.session.get(StorageEntry, key)
            if entry:
                entry.value = value
            else:
                db.session.add(StorageEntry(key=key, value=value))
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Erro ao gravar a chave '{key}': {e}")
            raise

    def remove_item(self, key):
        try:
            db.session.query(StorageEntry).filter_by(key=key).delete()
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Erro ao remover a chave '{key}': {e}")
            raise

    def keys(self):
        return list(db.session.scalars(select(StorageEntry.key).order_by(StorageEntry.key)))

    def replace_prefix(self, prefix, itens):
        # Remoção e gravação no mesmo commit: ou o backup entra inteiro ou nada muda
        try:
            db.session.execute(
                delete(StorageEntry)
                .where(StorageEntry.key.startswith(prefix, autoescape=True))
                .execution_options(synchronize_session='fetch')
            )
            db.session.add_all(StorageEntry(key=k, value=v) for k, v in itens.items())
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Erro ao substituir as chaves '{prefix}*': {e}")
            raise


def build_storage(nome: str) -> KeyValueStorage:
    if nome == 'memory':
        return MemoryStorage()
    if nome == 'sqlalchemy':
        return SQLAlchemyStorage()
    raise ValueError(f"Backend de armazenamento desconhecido: {nome!r}")
