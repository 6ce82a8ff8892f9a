"""Use case for creating or replacing a learning path."""

import structlog

from learnpath.application.learning.protocols import LearningPathRepositoryProtocol
from learnpath.domain.learning.entities import LearningPath

logger = structlog.get_logger(__name__)


class StoreLearningPathUseCase:
    """Use case for creating or replacing a learning path and its whole tree."""

    def __init__(self, learning_path_repository: LearningPathRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.learning_path_repository = learning_path_repository

    def store_learning_path(self, path: LearningPath) -> LearningPath:
        """
        Persist a learning path by replacing its stored tree.

        Rating aggregates on the given items are written as-is, so an edit
        must start from a loaded path to keep existing ratings.

        Args:
            path: The full learning path tree

        Returns:
            The stored path with allocated ids filled in

        Raises:
            ValidationError: If sequence numbers repeat within a level
            PartialWriteError: If the replace failed partway (safe to retry)
        """
        stored = self.learning_path_repository.replace_tree(path)
        logger.debug("store_learning_path_completed", learning_path_id=stored.id.value)
        return stored
