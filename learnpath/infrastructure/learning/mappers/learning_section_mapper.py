"""Mapper for LearningSection document ↔ Domain conversion."""

from typing import Any

from learnpath.application.ports import Document
from learnpath.domain.common.exceptions import DomainError
from learnpath.domain.common.value_objects import LearningPathId, LearningSectionId
from learnpath.domain.learning.entities import LearningSection
from learnpath.exceptions import MappingError
from learnpath.infrastructure.learning.mappers.kinds import LEARNING_SECTION
from learnpath.infrastructure.learning.mappers.property_reader import PropertyReader


class LearningSectionMapper:
    """Mapper for LearningSection document ↔ Domain conversion."""

    kind = LEARNING_SECTION

    def to_domain(self, document: Document) -> LearningSection:
        """Convert a stored document to a section without items."""
        reader = PropertyReader(document)
        try:
            return LearningSection(
                id=LearningSectionId(document.id),
                name=reader.required("name", str),
                sequence=reader.required("sequence", int),
                description=reader.optional("description", str),
                learning_path_id=LearningPathId(reader.required("learningPath", int)),
            )
        except (DomainError, ValueError) as e:
            raise MappingError(self.kind, document.id, None, str(e)) from e

    def to_properties(
        self, section: LearningSection, learning_path_id: LearningPathId
    ) -> dict[str, Any]:
        """Convert a section to its property bag, owned by the given path."""
        return {
            "learningPath": learning_path_id.value,
            "name": section.name,
            "description": section.description,
            "sequence": section.sequence,
        }
