"""Tests for settings, logging configuration and document store construction."""

import pytest
import structlog
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from learnpath.config import Settings, configure_logging
from learnpath.core import Container
from learnpath.database import build_document_store, dispose_engine, document_store_scope
from learnpath.domain.common.value_objects import LearningPathId
from learnpath.domain.learning.entities import LearningPath
from learnpath.infrastructure.persistence import InMemoryDocumentStore, SqlAlchemyDocumentStore


def test_default_settings() -> None:
    settings = Settings(_env_file=None)
    assert settings.DOCUMENT_STORE == "sqlalchemy"
    assert (settings.RATING_MIN, settings.RATING_MAX) == (1, 5)


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RATING_MAX", "10")
    monkeypatch.setenv("DOCUMENT_STORE", "memory")
    settings = Settings(_env_file=None)
    assert settings.RATING_MAX == 10
    assert settings.DOCUMENT_STORE == "memory"


def test_inverted_rating_range_rejected() -> None:
    with pytest.raises(PydanticValidationError, match="RATING_MIN"):
        Settings(_env_file=None, RATING_MIN=5, RATING_MAX=1)


def test_configure_logging() -> None:
    configure_logging("test")
    structlog.get_logger("learnpath.test").info("logging_configured")
    structlog.reset_defaults()


def test_memory_scope_is_shared() -> None:
    settings = Settings(_env_file=None, DOCUMENT_STORE="memory")
    try:
        with document_store_scope(settings) as first:
            first.put("LearningPath", {"name": "Go"}, 1)
        with document_store_scope(settings) as second:
            assert isinstance(second, InMemoryDocumentStore)
            assert second.get("LearningPath", 1) is not None
    finally:
        dispose_engine()


def test_sqlalchemy_scope_end_to_end() -> None:
    settings = Settings(_env_file=None, DATABASE_URL="sqlite:///:memory:")
    container = Container()
    try:
        with document_store_scope(settings) as store:
            assert isinstance(store, SqlAlchemyDocumentStore)
            with container.document_store.override(store):
                container.store_learning_path_use_case().store_learning_path(
                    LearningPath.create(id=LearningPathId(3), name="SQL")
                )
                summaries = container.list_learning_paths_use_case().list_learning_paths()
        assert [s.name for s in summaries] == ["SQL"]
    finally:
        dispose_engine()


def test_build_document_store(db_session: Session) -> None:
    memory_settings = Settings(_env_file=None, DOCUMENT_STORE="memory")
    try:
        store = build_document_store(memory_settings)
        assert isinstance(store, InMemoryDocumentStore)
        assert build_document_store(memory_settings) is store
    finally:
        dispose_engine()

    sql_store = build_document_store(Settings(_env_file=None), db_session)
    assert isinstance(sql_store, SqlAlchemyDocumentStore)
    assert sql_store.db is db_session
