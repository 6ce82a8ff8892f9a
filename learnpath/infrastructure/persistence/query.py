"""Query helpers shared by the document store implementations."""

from typing import Any

import structlog

from learnpath.application.ports import KEY, Document

logger = structlog.get_logger(__name__)

_BOOL_RANK = 0
_NUMBER_RANK = 1
_STRING_RANK = 2
_OTHER_RANK = 3


def _value_key(value: Any) -> tuple[int, Any]:  # noqa: ANN401
    """
    Sort key that orders values of different types by type first.

    Schemaless records can disagree on a property's type; comparing
    the values directly would raise TypeError.
    """
    if isinstance(value, bool):
        return (_BOOL_RANK, value)
    if isinstance(value, int | float):
        return (_NUMBER_RANK, value)
    if isinstance(value, str):
        return (_STRING_RANK, value)
    return (_OTHER_RANK, repr(value))


def sort_documents(documents: list[Document], sort: str | None) -> list[Document]:
    """Order documents the way DocumentStoreProtocol.query describes."""
    if sort is None:
        return documents
    if sort == KEY:
        return sorted(documents, key=lambda doc: doc.id)
    present = [doc for doc in documents if doc.properties.get(sort) is not None]
    if len(present) != len(documents):
        logger.debug(
            "sorted_query_dropped_documents",
            sort=sort,
            dropped=len(documents) - len(present),
        )
    # Key order breaks ties so results are deterministic.
    return sorted(present, key=lambda doc: (*_value_key(doc.properties[sort]), doc.id))
