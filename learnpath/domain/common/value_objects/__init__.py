"""Common value objects shared across all domain modules."""

from .ids import (
    ItemFeedbackId,
    LearningItemId,
    LearningPathId,
    LearningSectionId,
    UserId,
)

__all__ = [
    "ItemFeedbackId",
    "LearningItemId",
    "LearningPathId",
    "LearningSectionId",
    "UserId",
]
