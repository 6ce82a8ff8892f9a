"""Database models."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from learnpath.database import Base


class DocumentRecord(Base):
    """One schemaless document, addressed by (kind, entity_id)."""

    __tablename__ = "documents"

    kind: Mapped[str] = mapped_column(String(100), primary_key=True)
    entity_id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    properties: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of DocumentRecord."""
        return f"<DocumentRecord(kind={self.kind!r}, entity_id={self.entity_id})>"


class DocumentIdCounter(Base):
    """Highest entity_id ever used per kind. Deletes never lower it."""

    __tablename__ = "document_id_counters"

    kind: Mapped[str] = mapped_column(String(100), primary_key=True)
    last_id: Mapped[int] = mapped_column(nullable=False, default=0)

    def __repr__(self) -> str:
        """String representation of DocumentIdCounter."""
        return f"<DocumentIdCounter(kind={self.kind!r}, last_id={self.last_id})>"
