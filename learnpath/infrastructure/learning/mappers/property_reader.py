"""Typed access to a stored property bag."""

from typing import Any, TypeVar

from learnpath.application.ports import Document
from learnpath.exceptions import MappingError

T = TypeVar("T")

_MISSING = object()


class PropertyReader:
    """
    Reads properties of one document, raising MappingError on bad data.

    bool is a subclass of int in Python; it is rejected where an int is
    expected and the other way round.
    """

    def __init__(self, document: Document) -> None:
        self.document = document

    def _fail(self, field: str, reason: str) -> MappingError:
        return MappingError(self.document.kind, self.document.id, field, reason)

    def _typed(self, field: str, value: Any, expected: type[T]) -> T:  # noqa: ANN401
        if expected is int and isinstance(value, bool):
            raise self._fail(field, "must be int, got bool")
        if not isinstance(value, expected):
            raise self._fail(field, f"must be {expected.__name__}, got {type(value).__name__}")
        return value

    def required(self, field: str, expected: type[T]) -> T:
        value = self.document.properties.get(field, _MISSING)
        if value is _MISSING or value is None:
            raise self._fail(field, "is missing")
        return self._typed(field, value, expected)

    def optional(self, field: str, expected: type[T], default: T | None = None) -> T | None:
        value = self.document.properties.get(field, _MISSING)
        if value is _MISSING or value is None:
            return default
        return self._typed(field, value, expected)
