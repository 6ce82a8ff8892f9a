"""Repository for the learning path -> section -> item tree."""

from collections.abc import Callable, Iterable
from typing import TypeVar

import structlog

from learnpath.application.ports import Document, DocumentStoreProtocol, EqualityFilter
from learnpath.domain.common.value_objects import (
    LearningItemId,
    LearningPathId,
    LearningSectionId,
)
from learnpath.domain.learning.entities import (
    LearningItem,
    LearningPath,
    LearningPathSummary,
    LearningSection,
)
from learnpath.exceptions import (
    LearningItemNotFoundError,
    LearningPathNotFoundError,
    MappingError,
    PartialWriteError,
    ValidationError,
)
from learnpath.infrastructure.learning.mappers import (
    LearningItemMapper,
    LearningPathMapper,
    LearningSectionMapper,
)
from learnpath.infrastructure.learning.mappers.kinds import (
    LEARNING_ITEM,
    LEARNING_PATH,
    LEARNING_SECTION,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class _WriteProgress:
    """Counts store mutations made so far by a multi-step write."""

    def __init__(self) -> None:
        self.count = 0

    def step(self) -> None:
        self.count += 1


def map_documents(documents: Iterable[Document], to_domain: Callable[[Document], T]) -> list[T]:
    """
    Map documents, skipping the ones that cannot be mapped.

    One corrupt child record must not make its whole parent unreadable.
    """
    result: list[T] = []
    for document in documents:
        try:
            result.append(to_domain(document))
        except MappingError as e:
            logger.warning(
                "skipped_unmappable_record",
                kind=e.kind,
                entity_id=e.entity_id,
                field=e.field,
                reason=e.reason,
            )
    return result


class LearningPathRepository:
    """Repository for LearningPath aggregates and their items."""

    def __init__(self, document_store: DocumentStoreProtocol) -> None:
        self.document_store = document_store
        self.path_mapper = LearningPathMapper()
        self.section_mapper = LearningSectionMapper()
        self.item_mapper = LearningItemMapper()

    def list_summaries(self) -> list[LearningPathSummary]:
        """
        List every learning path.

        Returns:
            Summaries sorted by name ascending
        """
        documents = self.document_store.query(LEARNING_PATH, sort="name")
        return map_documents(documents, self.path_mapper.to_summary)

    def load(self, path_id: LearningPathId) -> LearningPath:
        """
        Load a path with its sections and items, each level ordered by sequence.

        Raises:
            LearningPathNotFoundError: If the path does not exist
            MappingError: If the path record itself cannot be mapped
        """
        document = self.document_store.get(LEARNING_PATH, path_id.value)
        if document is None:
            raise LearningPathNotFoundError(path_id.value)

        path = self.path_mapper.to_domain(document)
        path.sections = self.load_sections(path_id)
        return path

    def load_sections(self, path_id: LearningPathId) -> list[LearningSection]:
        """Sections of a path with their items, ordered by sequence."""
        documents = self.document_store.query(
            LEARNING_SECTION,
            filters=[EqualityFilter("learningPath", path_id.value)],
            sort="sequence",
        )
        sections = map_documents(documents, self.section_mapper.to_domain)
        for section in sections:
            section.items = self.load_items(section.id)
        return sections

    def load_items(self, section_id: LearningSectionId) -> list[LearningItem]:
        """Items of a section, ordered by sequence."""
        documents = self.document_store.query(
            LEARNING_ITEM,
            filters=[EqualityFilter("learningSection", section_id.value)],
            sort="sequence",
        )
        return map_documents(documents, self.item_mapper.to_domain)

    def load_item(self, item_id: LearningItemId) -> LearningItem:
        """
        Load a single item by id.

        Raises:
            LearningItemNotFoundError: If the item does not exist
            MappingError: If the item record cannot be mapped
        """
        document = self.document_store.get(LEARNING_ITEM, item_id.value)
        if document is None:
            raise LearningItemNotFoundError(item_id.value)
        return self.item_mapper.to_domain(document)

    def store_item(self, item: LearningItem) -> LearningItem:
        """
        Upsert a single item record using its own owner ids.

        Raises:
            ValidationError: If the item has no owning section or path
        """
        if item.learning_section_id is None or item.learning_path_id is None:
            raise ValidationError(
                "Learning item must know its section and path to be stored on its own",
                field="learning_section_id",
                value=item.id.value,
            )
        properties = self.item_mapper.to_properties(
            item, item.learning_section_id, item.learning_path_id
        )
        new_id = self.document_store.put(LEARNING_ITEM, properties, item.id.value or None)
        item.id = LearningItemId(new_id)
        return item

    def store(self, path: LearningPath) -> LearningPath:
        """Alias of replace_tree."""
        return self.replace_tree(path)

    def replace_tree(self, path: LearningPath) -> LearningPath:
        """
        Upsert the path record and replace its whole subtree.

        This is a destructive full replace, not a diff:
        1. put the path record
        2. delete every persisted section of the path, and each one's items
        3. insert every section of the given path, and for each one delete
           items still filed under its id before inserting the given items

        Rating aggregates are written as they appear on the given items, so
        callers editing structure must carry existing aggregates forward.
        Nothing is rolled back on failure. Repeating the call with the same
        tree converges, which is why PartialWriteError marks it retry-safe.

        Returns:
            The same path, with store-allocated ids and owner ids filled in

        Raises:
            ValidationError: If sequence numbers repeat within a level
            PartialWriteError: If a write fails after an earlier one succeeded
        """
        self._validate_sequences(path)

        progress = _WriteProgress()
        try:
            path_id = self.document_store.put(
                LEARNING_PATH, self.path_mapper.to_properties(path), path.id.value or None
            )
            progress.step()
            path.id = LearningPathId(path_id)

            self._delete_sections_of(path.id, progress)

            for section in path.sections:
                self._insert_section(path.id, section, progress)
        except Exception as e:
            if progress.count == 0:
                raise
            logger.error(
                "learning_path_replace_failed",
                learning_path_id=path.id.value,
                completed_writes=progress.count,
                error=str(e),
            )
            raise PartialWriteError(
                "replace_tree", path.id.value, retry_safe=True, completed_steps=progress.count
            ) from e

        logger.info(
            "stored_learning_path",
            learning_path_id=path.id.value,
            sections=len(path.sections),
            items=len(path.iter_items()),
        )
        return path

    def _validate_sequences(self, path: LearningPath) -> None:
        duplicates = path.duplicate_section_sequences()
        if duplicates:
            raise ValidationError(
                f"Section sequence numbers must be unique within learning path {path.id}",
                field="sequence",
                value=duplicates,
            )
        for section in path.sections:
            duplicates = section.duplicate_item_sequences()
            if duplicates:
                raise ValidationError(
                    f"Item sequence numbers must be unique within section '{section.name}'",
                    field="sequence",
                    value=duplicates,
                )

    def _delete_items_of(self, section_id: int, progress: _WriteProgress) -> None:
        documents = self.document_store.query(
            LEARNING_ITEM, filters=[EqualityFilter("learningSection", section_id)]
        )
        for document in documents:
            self.document_store.delete(LEARNING_ITEM, document.id)
            progress.step()

    def _delete_sections_of(self, path_id: LearningPathId, progress: _WriteProgress) -> None:
        # Raw documents: a corrupt record must still be deletable.
        documents = self.document_store.query(
            LEARNING_SECTION, filters=[EqualityFilter("learningPath", path_id.value)]
        )
        for document in documents:
            self._delete_items_of(document.id, progress)
            self.document_store.delete(LEARNING_SECTION, document.id)
            progress.step()

    def _insert_section(
        self, path_id: LearningPathId, section: LearningSection, progress: _WriteProgress
    ) -> None:
        section_id = self.document_store.put(
            LEARNING_SECTION,
            self.section_mapper.to_properties(section, path_id),
            section.id.value or None,
        )
        progress.step()
        section.id = LearningSectionId(section_id)
        section.learning_path_id = path_id

        self._delete_items_of(section_id, progress)

        for item in section.items:
            item_id = self.document_store.put(
                LEARNING_ITEM,
                self.item_mapper.to_properties(item, section.id, path_id),
                item.id.value or None,
            )
            progress.step()
            item.id = LearningItemId(item_id)
            item.assign_owners(section.id, path_id)
