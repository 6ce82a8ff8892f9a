"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from learnpath.core import Container
from learnpath.database import Base
from learnpath.domain.common.value_objects import LearningPathId
from learnpath.domain.learning.entities import LearningItem, LearningPath, LearningSection
from learnpath.infrastructure.learning.repositories import (
    ItemFeedbackRepository,
    LearningPathRepository,
)
from learnpath.infrastructure.persistence import InMemoryDocumentStore, SqlAlchemyDocumentStore
from learnpath.infrastructure.persistence import models  # noqa: F401

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def sql_store(db_session: Session) -> SqlAlchemyDocumentStore:
    return SqlAlchemyDocumentStore(db_session)


@pytest.fixture(params=["memory", "sqlalchemy"])
def any_store(
    request: pytest.FixtureRequest,
) -> InMemoryDocumentStore | SqlAlchemyDocumentStore:
    """Run a test against both document store implementations."""
    if request.param == "memory":
        return InMemoryDocumentStore()
    return SqlAlchemyDocumentStore(request.getfixturevalue("db_session"))


@pytest.fixture
def path_repository(any_store: InMemoryDocumentStore) -> LearningPathRepository:
    return LearningPathRepository(any_store)


@pytest.fixture
def feedback_repository(any_store: InMemoryDocumentStore) -> ItemFeedbackRepository:
    return ItemFeedbackRepository(any_store)


@pytest.fixture
def container(any_store: InMemoryDocumentStore) -> Generator[Container, None, None]:
    """Container wired to the test store."""
    container = Container()
    container.document_store.override(any_store)
    try:
        yield container
    finally:
        container.document_store.reset_override()


def make_path(
    path_id: int = 1,
    name: str = "Python Basics",
    items_per_section: tuple[int, ...] = (2, 3),
) -> LearningPath:
    """Build an unsaved tree: one section per entry, with that many items."""
    sections = []
    for section_index, item_count in enumerate(items_per_section, start=1):
        items = [
            LearningItem.create(
                name=f"Item {section_index}.{item_index}",
                sequence=item_index * 10,
                description=f"About item {section_index}.{item_index}",
                url=f"https://example.com/{section_index}/{item_index}",
            )
            for item_index in range(1, item_count + 1)
        ]
        sections.append(
            LearningSection.create(
                name=f"Section {section_index}",
                sequence=section_index * 10,
                description=f"About section {section_index}",
                items=items,
            )
        )
    return LearningPath.create(
        id=LearningPathId(path_id),
        name=name,
        description=f"All about {name}",
        sections=sections,
    )


@pytest.fixture
def path_factory() -> Callable[..., LearningPath]:
    return make_path
