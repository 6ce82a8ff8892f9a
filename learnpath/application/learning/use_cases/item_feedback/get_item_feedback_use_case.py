"""Use case for reading stored item feedback."""

from learnpath.application.learning.protocols import ItemFeedbackRepositoryProtocol
from learnpath.domain.common.value_objects import (
    ItemFeedbackId,
    LearningItemId,
    LearningPathId,
)
from learnpath.domain.learning.entities import ItemFeedback


class GetItemFeedbackUseCase:
    """Use case for reading stored item feedback."""

    def __init__(self, item_feedback_repository: ItemFeedbackRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.item_feedback_repository = item_feedback_repository

    def get_feedback(self, feedback_id: int) -> ItemFeedback:
        """
        Fetch one feedback record by id.

        Raises:
            ItemFeedbackNotFoundError: If no feedback has that id
        """
        return self.item_feedback_repository.get(ItemFeedbackId(feedback_id))

    def list_for_path(self, path_id: int) -> list[ItemFeedback]:
        """All feedback left on a learning path, ordered by feedback id."""
        return self.item_feedback_repository.list_by_path(LearningPathId(path_id))

    def list_for_item(self, item_id: int) -> list[ItemFeedback]:
        """All feedback left on a learning item, ordered by feedback id."""
        return self.item_feedback_repository.list_by_item(LearningItemId(item_id))
