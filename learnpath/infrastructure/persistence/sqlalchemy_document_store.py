"""Document store backed by a single SQLAlchemy table."""

from collections.abc import Mapping, Sequence
from typing import Any

import structlog
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from learnpath.application.ports import Document, EqualityFilter
from learnpath.infrastructure.persistence.models import DocumentIdCounter, DocumentRecord
from learnpath.infrastructure.persistence.query import sort_documents

logger = structlog.get_logger(__name__)


class SqlAlchemyDocumentStore:
    """
    SQLAlchemy implementation of DocumentStoreProtocol.

    Every call commits on its own, so a multi-call operation is not atomic.
    Property values live in a JSON column; equality filters and sorting are
    applied after loading the documents of the requested kind, which is fine
    for the dataset sizes this store serves.

    Allocated ids come from a per-kind counter row, so an id is never reused
    after its document is deleted.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _to_document(self, record: DocumentRecord) -> Document:
        return Document(kind=record.kind, id=record.entity_id, properties=dict(record.properties))

    def _counter(self, kind: str) -> DocumentIdCounter:
        counter = self.db.get(DocumentIdCounter, kind)
        if counter is None:
            # Seed from existing documents of a table that predates the counter
            stmt = select(func.max(DocumentRecord.entity_id)).where(DocumentRecord.kind == kind)
            counter = DocumentIdCounter(kind=kind, last_id=self.db.execute(stmt).scalar() or 0)
            self.db.add(counter)
        return counter

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def put(self, kind: str, properties: Mapping[str, Any], entity_id: int | None = None) -> int:
        counter = self._counter(kind)
        if not entity_id:
            entity_id = counter.last_id + 1
            logger.debug("allocated_document_id", kind=kind, entity_id=entity_id)
        counter.last_id = max(counter.last_id, entity_id)

        record = self.db.get(DocumentRecord, (kind, entity_id))
        if record is None:
            record = DocumentRecord(kind=kind, entity_id=entity_id, properties=dict(properties))
            self.db.add(record)
        else:
            record.properties = dict(properties)
        self._commit()
        return entity_id

    def get(self, kind: str, entity_id: int) -> Document | None:
        record = self.db.get(DocumentRecord, (kind, entity_id))
        return self._to_document(record) if record else None

    def delete(self, kind: str, entity_id: int) -> None:
        record = self.db.get(DocumentRecord, (kind, entity_id))
        if record is None:
            return
        self.db.delete(record)
        self._commit()

    def query(
        self,
        kind: str,
        filters: Sequence[EqualityFilter] = (),
        sort: str | None = None,
    ) -> list[Document]:
        stmt = select(DocumentRecord).where(DocumentRecord.kind == kind)
        records = self.db.execute(stmt).scalars().all()
        documents = [self._to_document(record) for record in records]
        documents = [doc for doc in documents if all(f.matches(doc) for f in filters)]
        return sort_documents(documents, sort)
