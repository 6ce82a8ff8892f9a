"""
Item feedback entity: one user's rating and completion mark on one item.
"""

from dataclasses import dataclass

from learnpath.domain.common.entity import Entity
from learnpath.domain.common.exceptions import DomainError
from learnpath.domain.common.value_objects import (
    ItemFeedbackId,
    LearningItemId,
    LearningPathId,
    LearningSectionId,
    UserId,
)


@dataclass(eq=False)
class ItemFeedback(Entity[ItemFeedbackId]):
    """
    Feedback a user left on a learning item.

    Business Rules:
    - At most one feedback per (user_id, learning_item_id); the feedback
      repository enforces this with a lookup before insert
    - The owner ids are weak references used for filtering only

    The allowed rating range is configuration, so it is checked by the
    submitting use case rather than here.
    """

    id: ItemFeedbackId
    learning_path_id: LearningPathId
    learning_section_id: LearningSectionId
    learning_item_id: LearningItemId
    user_id: UserId
    rating: int
    completed: bool

    def __post_init__(self) -> None:
        """Validate invariants."""
        if isinstance(self.rating, bool) or not isinstance(self.rating, int):
            raise DomainError("Feedback rating must be an integer")
        if not isinstance(self.completed, bool):
            raise DomainError("Feedback completed flag must be a boolean")

    @classmethod
    def create(
        cls,
        learning_path_id: LearningPathId,
        learning_section_id: LearningSectionId,
        learning_item_id: LearningItemId,
        user_id: UserId,
        rating: int,
        completed: bool,
    ) -> "ItemFeedback":
        """Create new feedback (ID will be 0 until persisted)."""
        return cls(
            id=ItemFeedbackId.generate(),
            learning_path_id=learning_path_id,
            learning_section_id=learning_section_id,
            learning_item_id=learning_item_id,
            user_id=user_id,
            rating=rating,
            completed=completed,
        )
