"""Mapper for LearningItem document ↔ Domain conversion."""

from typing import Any

from learnpath.application.ports import Document
from learnpath.domain.common.exceptions import DomainError
from learnpath.domain.common.value_objects import (
    LearningItemId,
    LearningPathId,
    LearningSectionId,
)
from learnpath.domain.learning.entities import LearningItem
from learnpath.exceptions import MappingError
from learnpath.infrastructure.learning.mappers.kinds import LEARNING_ITEM
from learnpath.infrastructure.learning.mappers.property_reader import PropertyReader


class LearningItemMapper:
    """
    Mapper for LearningItem document ↔ Domain conversion.

    The transient per-user fields (user_rating, completed) are never written.
    """

    kind = LEARNING_ITEM

    def to_domain(self, document: Document) -> LearningItem:
        """Convert a stored document to an item."""
        reader = PropertyReader(document)
        try:
            return LearningItem(
                id=LearningItemId(document.id),
                name=reader.required("name", str),
                sequence=reader.required("sequence", int),
                description=reader.optional("description", str),
                url=reader.optional("url", str),
                learning_section_id=LearningSectionId(reader.required("learningSection", int)),
                learning_path_id=LearningPathId(reader.required("learningPath", int)),
                rating_count=reader.required("ratingCount", int),
                rating_total=reader.required("ratingTotal", int),
            )
        except (DomainError, ValueError) as e:
            raise MappingError(self.kind, document.id, None, str(e)) from e

    def to_properties(
        self,
        item: LearningItem,
        learning_section_id: LearningSectionId,
        learning_path_id: LearningPathId,
    ) -> dict[str, Any]:
        """Convert an item to its property bag, owned by the given section and path."""
        return {
            "learningPath": learning_path_id.value,
            "learningSection": learning_section_id.value,
            "name": item.name,
            "description": item.description,
            "sequence": item.sequence,
            "url": item.url,
            "ratingCount": item.rating_count,
            "ratingTotal": item.rating_total,
        }
