"""Database configuration and document store construction."""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from learnpath.application.ports import DocumentStoreProtocol
from learnpath.config import Settings


class Base(DeclarativeBase):
    """Base class for all database models."""


# Module-level singletons (application-scoped)
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None
_memory_store: DocumentStoreProtocol | None = None


def initialize_database(settings: Settings) -> None:
    """Initialize database engine and session factory once at startup."""
    global _engine, _session_factory  # noqa: PLW0603

    if settings.DATABASE_URL.startswith("sqlite"):
        _engine = create_engine(
            settings.DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        _engine = create_engine(
            settings.DATABASE_URL,
            pool_pre_ping=True,
            pool_recycle=3600,
        )

    # Registers DocumentRecord on Base.metadata
    from learnpath.infrastructure.persistence import models  # noqa: F401, PLC0415

    Base.metadata.create_all(bind=_engine)
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def get_session_factory(settings: Settings) -> sessionmaker[Session]:
    """Get session factory (returns singleton)."""
    if _session_factory is None:
        initialize_database(settings)

    if _session_factory is None:
        raise RuntimeError("Failed to initialize database session factory.")

    return _session_factory


def dispose_engine() -> None:
    """Dispose database engine on shutdown."""
    global _engine, _session_factory, _memory_store  # noqa: PLW0603
    _memory_store = None
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None


def build_document_store(
    settings: Settings, db: Session | None = None
) -> DocumentStoreProtocol:
    """
    Create the document store selected by settings.DOCUMENT_STORE.

    The memory store is a process-wide singleton. The SQLAlchemy store
    wraps the given session, or a new one from the session factory; the
    caller owns that session and must close it.
    """
    global _memory_store  # noqa: PLW0603

    from learnpath.infrastructure.persistence import (  # noqa: PLC0415
        InMemoryDocumentStore,
        SqlAlchemyDocumentStore,
    )

    if settings.DOCUMENT_STORE == "memory":
        if _memory_store is None:
            _memory_store = InMemoryDocumentStore()
        return _memory_store

    if db is None:
        db = get_session_factory(settings)()
    return SqlAlchemyDocumentStore(db)


@contextmanager
def document_store_scope(settings: Settings) -> Generator[DocumentStoreProtocol, None, None]:
    """
    Yield the configured document store for one unit of work.

    The SQLAlchemy store gets a fresh session that is closed afterwards.
    The memory store is shared by every scope of the process.
    """
    if settings.DOCUMENT_STORE == "memory":
        yield build_document_store(settings)
        return

    db = get_session_factory(settings)()
    try:
        yield build_document_store(settings, db)
    finally:
        db.close()
