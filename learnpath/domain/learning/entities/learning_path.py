"""
Learning path aggregate: the root of the path -> section -> item tree.
"""

from dataclasses import dataclass, field

from learnpath.domain.common.entity import Entity
from learnpath.domain.common.exceptions import DomainError
from learnpath.domain.common.value_objects import LearningItemId, LearningPathId
from learnpath.domain.learning.entities.learning_item import LearningItem
from learnpath.domain.learning.entities.learning_section import LearningSection


@dataclass(frozen=True)
class LearningPathSummary:
    """Id and name of a learning path, for listings."""

    id: LearningPathId
    name: str


@dataclass(eq=False)
class LearningPath(Entity[LearningPathId]):
    """
    A course-like sequence of sections.

    Business Rules:
    - Name cannot be empty
    - Section sequence numbers are unique within the path, and item
      sequence numbers are unique within their section. Storage does not
      enforce this; the tree repository checks it before writing.

    completion is user-scoped and computed on read. It is never persisted.
    """

    id: LearningPathId
    name: str
    description: str = ""
    sections: list[LearningSection] = field(default_factory=list)
    completion: float | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise DomainError("Learning path name cannot be empty")

    def summary(self) -> LearningPathSummary:
        return LearningPathSummary(id=self.id, name=self.name)

    def iter_items(self) -> list[LearningItem]:
        """All items of the path, section by section."""
        return [item for section in self.sections for item in section.items]

    def find_item(self, item_id: LearningItemId) -> LearningItem | None:
        for section in self.sections:
            item = section.get_item_by_id(item_id)
            if item is not None:
                return item
        return None

    def duplicate_section_sequences(self) -> list[int]:
        """Sequence numbers used by more than one section, in ascending order."""
        seen: set[int] = set()
        duplicates: set[int] = set()
        for section in self.sections:
            if section.sequence in seen:
                duplicates.add(section.sequence)
            seen.add(section.sequence)
        return sorted(duplicates)

    @classmethod
    def create(
        cls,
        id: LearningPathId,
        name: str,
        description: str = "",
        sections: list[LearningSection] | None = None,
    ) -> "LearningPath":
        """Create a learning path with an externally allocated id."""
        return cls(
            id=id,
            name=name.strip(),
            description=description,
            sections=list(sections or []),
        )
