"""In-process document store, used in tests and for the "memory" backend."""

from collections.abc import Mapping, Sequence
from copy import deepcopy
from typing import Any

from learnpath.application.ports import Document, EqualityFilter
from learnpath.infrastructure.persistence.query import sort_documents


class InMemoryDocumentStore:
    """
    Dict-backed implementation of DocumentStoreProtocol.

    Properties are deep-copied on the way in and out so callers cannot
    mutate stored state through a returned document. Allocated ids are
    never handed out twice, even after the document holding one is deleted.
    """

    def __init__(self) -> None:
        self._documents: dict[str, dict[int, dict[str, Any]]] = {}
        self._last_ids: dict[str, int] = {}

    def _bucket(self, kind: str) -> dict[int, dict[str, Any]]:
        return self._documents.setdefault(kind, {})

    def put(self, kind: str, properties: Mapping[str, Any], entity_id: int | None = None) -> int:
        bucket = self._bucket(kind)
        last_id = self._last_ids.get(kind, 0)
        if not entity_id:
            entity_id = last_id + 1
        self._last_ids[kind] = max(last_id, entity_id)
        bucket[entity_id] = deepcopy(dict(properties))
        return entity_id

    def get(self, kind: str, entity_id: int) -> Document | None:
        properties = self._bucket(kind).get(entity_id)
        if properties is None:
            return None
        return Document(kind=kind, id=entity_id, properties=deepcopy(properties))

    def delete(self, kind: str, entity_id: int) -> None:
        self._bucket(kind).pop(entity_id, None)

    def query(
        self,
        kind: str,
        filters: Sequence[EqualityFilter] = (),
        sort: str | None = None,
    ) -> list[Document]:
        documents = [
            Document(kind=kind, id=entity_id, properties=deepcopy(properties))
            for entity_id, properties in self._bucket(kind).items()
        ]
        documents = [doc for doc in documents if all(f.matches(doc) for f in filters)]
        return sort_documents(documents, sort)

    def count(self, kind: str) -> int:
        """Number of stored documents of a kind."""
        return len(self._bucket(kind))

