"""Mapper for LearningPath document ↔ Domain conversion."""

from typing import Any

from learnpath.application.ports import Document
from learnpath.domain.common.exceptions import DomainError
from learnpath.domain.common.value_objects import LearningPathId
from learnpath.domain.learning.entities import LearningPath, LearningPathSummary
from learnpath.exceptions import MappingError
from learnpath.infrastructure.learning.mappers.kinds import LEARNING_PATH
from learnpath.infrastructure.learning.mappers.property_reader import PropertyReader


class LearningPathMapper:
    """
    Mapper for LearningPath document ↔ Domain conversion.

    Only the path's own record is handled here; sections are separate
    documents. Records written before descriptions were stored have no
    "description" property and map to an empty description.
    """

    kind = LEARNING_PATH

    def to_domain(self, document: Document) -> LearningPath:
        """Convert a stored document to a path without sections."""
        reader = PropertyReader(document)
        try:
            return LearningPath(
                id=LearningPathId(document.id),
                name=reader.required("name", str),
                description=reader.optional("description", str, default="") or "",
            )
        except (DomainError, ValueError) as e:
            raise MappingError(self.kind, document.id, None, str(e)) from e

    def to_summary(self, document: Document) -> LearningPathSummary:
        return self.to_domain(document).summary()

    def to_properties(self, path: LearningPath) -> dict[str, Any]:
        """Convert a path to its property bag."""
        return {
            "name": path.name,
            "description": path.description,
        }
