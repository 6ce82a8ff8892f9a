"""Use case for loading a single learning item."""

from learnpath.application.learning.protocols import LearningPathRepositoryProtocol
from learnpath.domain.common.value_objects import LearningItemId
from learnpath.domain.learning.entities import LearningItem


class GetLearningItemUseCase:
    """Use case for loading a single learning item."""

    def __init__(self, learning_path_repository: LearningPathRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.learning_path_repository = learning_path_repository

    def get_learning_item(self, item_id: int) -> LearningItem:
        """
        Load a learning item with its rating aggregate.

        Raises:
            LearningItemNotFoundError: If the item does not exist
        """
        return self.learning_path_repository.load_item(LearningItemId(item_id))
