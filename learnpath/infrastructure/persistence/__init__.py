from .in_memory_document_store import InMemoryDocumentStore
from .sqlalchemy_document_store import SqlAlchemyDocumentStore

__all__ = [
    "InMemoryDocumentStore",
    "SqlAlchemyDocumentStore",
]
