"""
Application ports (interfaces for external dependencies).

Ports define the boundaries between the application layer and
the infrastructure layer. They are interfaces that the infrastructure
layer must implement.
"""

from .document_store import KEY, Document, DocumentStoreProtocol, EqualityFilter

__all__ = [
    "KEY",
    "Document",
    "DocumentStoreProtocol",
    "EqualityFilter",
]
