"""
Learning item entity: the leaf of the path -> section -> item tree.
"""

from dataclasses import dataclass

from learnpath.domain.common.entity import Entity
from learnpath.domain.common.exceptions import DomainError, InvariantViolationError
from learnpath.domain.common.value_objects import (
    LearningItemId,
    LearningPathId,
    LearningSectionId,
)
from learnpath.domain.learning.entities.item_feedback import ItemFeedback


@dataclass(eq=False)
class LearningItem(Entity[LearningItemId]):
    """
    A single unit of learning content (an article, a video, an exercise).

    Business Rules:
    - Name cannot be empty
    - rating_count is never negative
    - rating_total is the sum of every user's latest rating

    The owner ids are derived data written by the tree repository only.
    user_rating and completed are transient: they are filled in when the
    item is loaded for a specific user and are never persisted.
    """

    id: LearningItemId
    name: str
    sequence: int
    description: str | None = None
    url: str | None = None
    learning_section_id: LearningSectionId | None = None
    learning_path_id: LearningPathId | None = None
    rating_count: int = 0
    rating_total: int = 0

    user_rating: int | None = None
    completed: bool | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise DomainError("Learning item name cannot be empty")
        if isinstance(self.sequence, bool) or not isinstance(self.sequence, int):
            raise DomainError("Learning item sequence must be an integer")
        if self.rating_count < 0:
            raise DomainError("Learning item rating count cannot be negative")

    @property
    def average_rating(self) -> float | None:
        """Mean of all submitted ratings, or None when nobody rated the item."""
        if self.rating_count <= 0:
            return None
        return self.rating_total / self.rating_count

    @property
    def has_user_state(self) -> bool:
        return self.user_rating is not None or self.completed is not None

    def apply_rating_delta(self, count_delta: int, total_delta: int) -> None:
        """
        Apply an incremental change to the rating aggregate.

        Raises:
            InvariantViolationError: If the count would drop below zero
        """
        new_count = self.rating_count + count_delta
        if new_count < 0:
            raise InvariantViolationError("LearningItem", "rating count cannot go negative")
        self.rating_count = new_count
        self.rating_total += total_delta

    def apply_user_feedback(self, feedback: ItemFeedback) -> None:
        """Attach one user's rating and completion mark to this item."""
        self.user_rating = feedback.rating
        self.completed = feedback.completed

    def assign_owners(
        self, learning_section_id: LearningSectionId, learning_path_id: LearningPathId
    ) -> None:
        """Set the denormalized owner ids."""
        self.learning_section_id = learning_section_id
        self.learning_path_id = learning_path_id

    @classmethod
    def create(
        cls,
        name: str,
        sequence: int,
        description: str | None = None,
        url: str | None = None,
    ) -> "LearningItem":
        """Create a new item (ID will be 0 until persisted)."""
        return cls(
            id=LearningItemId.generate(),
            name=name.strip(),
            sequence=sequence,
            description=description,
            url=url,
        )
