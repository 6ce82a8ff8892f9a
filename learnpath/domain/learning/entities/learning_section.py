from dataclasses import dataclass, field

from learnpath.domain.common.entity import Entity
from learnpath.domain.common.exceptions import DomainError
from learnpath.domain.common.value_objects import (
    LearningItemId,
    LearningPathId,
    LearningSectionId,
)
from learnpath.domain.learning.entities.learning_item import LearningItem


@dataclass(eq=False)
class LearningSection(Entity[LearningSectionId]):
    """
    An ordered group of learning items inside a learning path.

    Items are kept in the order they were loaded (ascending sequence).
    """

    id: LearningSectionId
    name: str
    sequence: int
    description: str | None = None
    learning_path_id: LearningPathId | None = None
    items: list[LearningItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise DomainError("Learning section name cannot be empty")
        if isinstance(self.sequence, bool) or not isinstance(self.sequence, int):
            raise DomainError("Learning section sequence must be an integer")

    @property
    def num_items(self) -> int:
        return len(self.items)

    def get_item_by_id(self, item_id: LearningItemId) -> LearningItem | None:
        """Find an item of this section by id."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def duplicate_item_sequences(self) -> list[int]:
        """Sequence numbers used by more than one item, in ascending order."""
        seen: set[int] = set()
        duplicates: set[int] = set()
        for item in self.items:
            if item.sequence in seen:
                duplicates.add(item.sequence)
            seen.add(item.sequence)
        return sorted(duplicates)

    @classmethod
    def create(
        cls,
        name: str,
        sequence: int,
        description: str | None = None,
        items: list[LearningItem] | None = None,
    ) -> "LearningSection":
        """Create a new section (ID will be 0 until persisted)."""
        return cls(
            id=LearningSectionId.generate(),
            name=name.strip(),
            sequence=sequence,
            description=description,
            items=list(items or []),
        )
