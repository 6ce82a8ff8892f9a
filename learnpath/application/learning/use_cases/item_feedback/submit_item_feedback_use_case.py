"""Use case for submitting a user's feedback on a learning item."""

import structlog

from learnpath.application.learning.protocols import (
    ItemFeedbackRepositoryProtocol,
    LearningPathRepositoryProtocol,
)
from learnpath.domain.common.value_objects import LearningItemId, UserId
from learnpath.domain.learning.entities import ItemFeedback, LearningItem
from learnpath.domain.learning.services import RatingAggregationService
from learnpath.exceptions import PartialWriteError, ValidationError

logger = structlog.get_logger(__name__)


class SubmitItemFeedbackUseCase:
    """
    Use case for submitting feedback and updating the item's rating aggregate.

    The feedback write and the item write are separate store calls with no
    rollback. Concurrent submissions for the same user and item are not
    serialized here; callers that can race must serialize per item.
    """

    def __init__(
        self,
        learning_path_repository: LearningPathRepositoryProtocol,
        item_feedback_repository: ItemFeedbackRepositoryProtocol,
        rating_aggregation_service: RatingAggregationService,
        rating_min: int = 1,
        rating_max: int = 5,
    ) -> None:
        """Initialize use case with repository protocols, services and rating range."""
        self.learning_path_repository = learning_path_repository
        self.item_feedback_repository = item_feedback_repository
        self.rating_aggregation_service = rating_aggregation_service
        self.rating_min = rating_min
        self.rating_max = rating_max

    def _validate(self, rating: int, completed: bool) -> None:
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise ValidationError("Rating must be an integer", field="rating", value=rating)
        if not self.rating_min <= rating <= self.rating_max:
            raise ValidationError(
                f"Rating must be between {self.rating_min} and {self.rating_max}",
                field="rating",
                value=rating,
            )
        if not isinstance(completed, bool):
            raise ValidationError(
                "Completed must be a boolean", field="completed", value=completed
            )

    def submit_feedback(
        self,
        path_id: int,
        item_id: int,
        user_id: str,
        rating: int,
        completed: bool,
    ) -> LearningItem:
        """
        Record a user's rating and completion mark on an item.

        A user's first feedback on an item adds one to ratingCount and the
        rating to ratingTotal. Later feedback from the same user replaces
        their previous rating: the count stays, the total moves by the
        difference.

        Args:
            path_id: ID of the learning path the item belongs to
            item_id: ID of the learning item
            user_id: ID of the acting user
            rating: Rating within the configured range
            completed: Whether the user completed the item

        Returns:
            The item with its updated rating aggregate

        Raises:
            ValidationError: If an argument is out of range, or the item is
                not part of the given path
            LearningItemNotFoundError: If the item does not exist
            PartialWriteError: If the feedback was stored but the item update
                failed. Not safe to retry: the aggregate would be applied twice.
        """
        self._validate(rating, completed)
        try:
            user_id_vo = UserId(user_id)
        except (TypeError, ValueError) as e:
            raise ValidationError(str(e), field="user_id", value=user_id) from e

        item = self.learning_path_repository.load_item(LearningItemId(item_id))
        if item.learning_path_id is None or item.learning_section_id is None:
            raise ValidationError(
                f"Learning item {item_id} is not attached to a learning path",
                field="item_id",
                value=item_id,
            )
        if item.learning_path_id.value != path_id:
            raise ValidationError(
                f"Learning item {item_id} does not belong to learning path {path_id}",
                field="path_id",
                value=path_id,
            )

        feedback = ItemFeedback.create(
            learning_path_id=item.learning_path_id,
            learning_section_id=item.learning_section_id,
            learning_item_id=item.id,
            user_id=user_id_vo,
            rating=rating,
            completed=completed,
        )
        feedback, previous = self.item_feedback_repository.upsert(feedback)

        delta = self.rating_aggregation_service.apply(item, previous, rating)
        try:
            item = self.learning_path_repository.store_item(item)
        except Exception as e:
            logger.error(
                "rating_aggregate_update_failed",
                learning_item_id=item_id,
                feedback_id=feedback.id.value,
                error=str(e),
            )
            raise PartialWriteError(
                "submit_feedback", item_id, retry_safe=False, completed_steps=1
            ) from e

        logger.info(
            "submitted_item_feedback",
            learning_item_id=item_id,
            feedback_id=feedback.id.value,
            count_delta=delta.count_delta,
            total_delta=delta.total_delta,
        )
        return item
