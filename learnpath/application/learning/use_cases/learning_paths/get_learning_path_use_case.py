"""Use case for loading a learning path."""

from learnpath.application.learning.protocols import LearningPathRepositoryProtocol
from learnpath.domain.common.value_objects import LearningPathId
from learnpath.domain.learning.entities import LearningPath


class GetLearningPathUseCase:
    """Use case for loading a learning path without user state."""

    def __init__(self, learning_path_repository: LearningPathRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.learning_path_repository = learning_path_repository

    def get_learning_path(self, path_id: int) -> LearningPath:
        """
        Load a learning path with its ordered sections and items.

        Args:
            path_id: ID of the learning path

        Returns:
            The learning path

        Raises:
            LearningPathNotFoundError: If the path does not exist
        """
        return self.learning_path_repository.load(LearningPathId(path_id))
