"""Use case for listing learning paths."""

from learnpath.application.learning.protocols import LearningPathRepositoryProtocol
from learnpath.domain.learning.entities import LearningPathSummary


class ListLearningPathsUseCase:
    """Use case for listing learning paths."""

    def __init__(self, learning_path_repository: LearningPathRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.learning_path_repository = learning_path_repository

    def list_learning_paths(self) -> list[LearningPathSummary]:
        """
        List the id and name of every learning path.

        Returns:
            Summaries sorted by name ascending
        """
        return self.learning_path_repository.list_summaries()
