# agente_professor/models/storage_entry.py

from __future__ import annotations
from datetime import datetime, timezone

from sqlalchemy.orm import Mapped, mapped_column

from .database import db


class StorageEntry(db.Model):
    """Uma chave do espaço de armazenamento; o valor é a coleção serializada em JSON."""
    __tablename__ = 'storage_entries'

    key: Mapped[str] = mapped_column(db.String(150), primary_key=True)
    value: Mapped[str] = mapped_column(db.Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __init__(self, key: str, value: str, **kw) -> None:
        super().__init__(key=key, value=value, **kw)

    def __repr__(self) -> str:
        return f"<StorageEntry key='{self.key}' bytes={len(self.value or '')}>"
