"""Protocol for the learning path (content tree) repository."""

from typing import Protocol

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


class LearningPathRepositoryProtocol(Protocol):
    """Protocol for reading and writing the path -> section -> item tree."""

    def list_summaries(self) -> list[LearningPathSummary]:
        """
        List every learning path.

        Returns:
            Summaries sorted by name ascending
        """
        ...

    def replace_tree(self, path: LearningPath) -> LearningPath:
        """
        Upsert the path record and replace its whole subtree.

        All persisted sections (and their items) are deleted, then every
        section and item of the given path is inserted. Rating aggregates
        are written exactly as they appear on the given items.

        Args:
            path: The full tree to persist

        Returns:
            The same path with store-allocated ids and owner ids filled in

        Raises:
            ValidationError: If sequence numbers repeat within a level
            PartialWriteError: If a write fails after an earlier one succeeded
        """
        ...

    def store(self, path: LearningPath) -> LearningPath:
        """Alias of replace_tree."""
        ...

    def load(self, path_id: LearningPathId) -> LearningPath:
        """
        Load a path with its sections and items, each level ordered by sequence.

        Raises:
            LearningPathNotFoundError: If the path does not exist
        """
        ...

    def load_sections(self, path_id: LearningPathId) -> list[LearningSection]:
        """Sections of a path with their items, ordered by sequence."""
        ...

    def load_items(self, section_id: LearningSectionId) -> list[LearningItem]:
        """Items of a section, ordered by sequence."""
        ...

    def load_item(self, item_id: LearningItemId) -> LearningItem:
        """
        Load a single item by id.

        Raises:
            LearningItemNotFoundError: If the item does not exist
        """
        ...

    def store_item(self, item: LearningItem) -> LearningItem:
        """
        Upsert a single item record using its own owner ids.

        Used for aggregate updates without touching sibling records.
        """
        ...
