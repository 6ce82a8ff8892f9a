"""Protocol for the item feedback repository."""

from typing import Protocol

from learnpath.domain.common.value_objects import (
    ItemFeedbackId,
    LearningItemId,
    LearningPathId,
    LearningSectionId,
    UserId,
)
from learnpath.domain.learning.entities import ItemFeedback


class ItemFeedbackRepositoryProtocol(Protocol):
    """Protocol for ItemFeedback lookups and writes."""

    def find(self, user_id: UserId, item_id: LearningItemId) -> ItemFeedback | None:
        """
        Find a user's feedback on an item.

        Returns:
            The first matching feedback, or None
        """
        ...

    def get(self, feedback_id: ItemFeedbackId) -> ItemFeedback:
        """
        Fetch feedback by its own id.

        Raises:
            ItemFeedbackNotFoundError: If no feedback has that id
        """
        ...

    def list_by_user_and_section(
        self, user_id: UserId, section_id: LearningSectionId
    ) -> list[ItemFeedback]:
        """A user's feedback on the items of one section, in no particular order."""
        ...

    def list_by_path(self, path_id: LearningPathId) -> list[ItemFeedback]:
        """All feedback on a path, ordered by feedback id."""
        ...

    def list_by_item(self, item_id: LearningItemId) -> list[ItemFeedback]:
        """All feedback on one item, ordered by feedback id."""
        ...

    def upsert(self, feedback: ItemFeedback) -> tuple[ItemFeedback, ItemFeedback | None]:
        """
        Insert feedback, or overwrite the user's existing feedback on the item.

        An existing record keeps its id.

        Returns:
            (stored feedback, feedback as it was before this call or None)
        """
        ...
