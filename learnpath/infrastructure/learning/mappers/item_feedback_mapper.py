"""Mapper for ItemFeedback document ↔ Domain conversion."""

from typing import Any

from learnpath.application.ports import Document
from learnpath.domain.common.exceptions import DomainError
from learnpath.domain.common.value_objects import (
    ItemFeedbackId,
    LearningItemId,
    LearningPathId,
    LearningSectionId,
    UserId,
)
from learnpath.domain.learning.entities import ItemFeedback
from learnpath.exceptions import MappingError
from learnpath.infrastructure.learning.mappers.kinds import ITEM_FEEDBACK
from learnpath.infrastructure.learning.mappers.property_reader import PropertyReader


class ItemFeedbackMapper:
    """Mapper for ItemFeedback document ↔ Domain conversion."""

    kind = ITEM_FEEDBACK

    def to_domain(self, document: Document) -> ItemFeedback:
        """Convert a stored document to feedback."""
        reader = PropertyReader(document)
        try:
            return ItemFeedback(
                id=ItemFeedbackId(document.id),
                learning_path_id=LearningPathId(reader.required("learningPath", int)),
                learning_section_id=LearningSectionId(reader.required("learningSection", int)),
                learning_item_id=LearningItemId(reader.required("learningItem", int)),
                user_id=UserId(reader.required("userId", str)),
                rating=reader.required("rating", int),
                completed=reader.required("completed", bool),
            )
        except (DomainError, ValueError) as e:
            raise MappingError(self.kind, document.id, None, str(e)) from e

    def to_properties(self, feedback: ItemFeedback) -> dict[str, Any]:
        """Convert feedback to its property bag."""
        return {
            "learningPath": feedback.learning_path_id.value,
            "learningSection": feedback.learning_section_id.value,
            "learningItem": feedback.learning_item_id.value,
            "userId": feedback.user_id.value,
            "rating": feedback.rating,
            "completed": feedback.completed,
        }
