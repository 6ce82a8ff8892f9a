"""Port for the schemaless key/document store."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

# Sort on the record key instead of a property.
KEY = "__key__"


@dataclass(frozen=True)
class Document:
    """A stored record: kind, key id, and its property bag."""

    kind: str
    id: int
    properties: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EqualityFilter:
    """Matches documents whose property equals value."""

    name: str
    value: Any

    def matches(self, document: Document) -> bool:
        if self.name not in document.properties:
            return False
        stored = document.properties[self.name]
        # A stored True must not match the integer 1, or the other way round.
        if isinstance(stored, bool) != isinstance(self.value, bool):
            return False
        return bool(stored == self.value)


@runtime_checkable
class DocumentStoreProtocol(Protocol):
    """
    Key-addressed document storage with simple equality queries.

    Stores are schemaless: nothing checks property names or types on write,
    so absent or mistyped properties only surface when mapping a record.
    Store failures propagate unchanged; there is no retry at this layer.
    """

    def put(self, kind: str, properties: Mapping[str, Any], entity_id: int | None = None) -> int:
        """
        Insert or overwrite a document.

        Args:
            kind: Record kind
            properties: Property bag to store
            entity_id: Key id; None or 0 asks the store to allocate one

        Returns:
            The key id of the stored document
        """
        ...

    def get(self, kind: str, entity_id: int) -> Document | None:
        """Fetch a document by key, or None when absent."""
        ...

    def delete(self, kind: str, entity_id: int) -> None:
        """Delete a document by key. Deleting an absent key is a no-op."""
        ...

    def query(
        self,
        kind: str,
        filters: Sequence[EqualityFilter] = (),
        sort: str | None = None,
    ) -> list[Document]:
        """
        Documents of a kind matching every equality filter.

        Args:
            kind: Record kind
            filters: Equality filters, all of which must match
            sort: Property to sort ascending on, KEY for key order, or None
                for unspecified order. Documents lacking the sort property
                are left out of a sorted result.

        Returns:
            Matching documents
        """
        ...
