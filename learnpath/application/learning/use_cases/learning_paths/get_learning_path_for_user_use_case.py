"""Use case for loading a learning path together with one user's progress."""

import structlog

from learnpath.application.learning.protocols import (
    ItemFeedbackRepositoryProtocol,
    LearningPathRepositoryProtocol,
)
from learnpath.domain.common.value_objects import LearningPathId, UserId
from learnpath.domain.learning.entities import LearningPath
from learnpath.domain.learning.services import CompletionService
from learnpath.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class GetLearningPathForUserUseCase:
    """Use case for loading a learning path with a user's ratings and completion."""

    def __init__(
        self,
        learning_path_repository: LearningPathRepositoryProtocol,
        item_feedback_repository: ItemFeedbackRepositoryProtocol,
        completion_service: CompletionService,
    ) -> None:
        """Initialize use case with repository protocols and domain services."""
        self.learning_path_repository = learning_path_repository
        self.item_feedback_repository = item_feedback_repository
        self.completion_service = completion_service

    def get_learning_path_for_user(self, path_id: int, user_id: str) -> LearningPath:
        """
        Load a learning path and attach the user's progress to it.

        Each item the user left feedback on gets user_rating and completed
        set. path.completion is the mean of the section completion ratios;
        it is recomputed on every call and never stored.

        Args:
            path_id: ID of the learning path
            user_id: ID of the acting user

        Returns:
            The learning path with user state

        Raises:
            LearningPathNotFoundError: If the path does not exist
            ValidationError: If user_id is empty
        """
        try:
            user_id_vo = UserId(user_id)
        except (TypeError, ValueError) as e:
            raise ValidationError(str(e), field="user_id", value=user_id) from e

        path = self.learning_path_repository.load(LearningPathId(path_id))

        for section in path.sections:
            feedback = self.item_feedback_repository.list_by_user_and_section(
                user_id_vo, section.id
            )
            self.completion_service.attach_feedback(section, feedback)

        path.completion = self.completion_service.path_completion(path)

        logger.debug(
            "loaded_learning_path_for_user",
            learning_path_id=path_id,
            user_id=user_id,
            completion=path.completion,
        )
        return path
