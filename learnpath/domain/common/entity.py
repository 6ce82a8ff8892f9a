"""
Base class for Entities.

Entities have a distinct identity that runs through time. Two entities are
equal if they have the same identity, regardless of their attributes.

Identifiers in this system are allocated outside the process (by whoever
authors the content, or by the document store), so an id of 0 means
"not yet persisted" and asks the store to allocate one.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed integer entity identifiers.

    Example:
        section_id = LearningSectionId(42)
        item_id = LearningItemId(42)
        # Different types, so they cannot be mixed up by accident
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{self.__class__.__name__} must be an int")
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id. The document store assigns the real one."""
        return cls(0)

    def is_assigned(self) -> bool:
        """Whether this id refers to a persisted record."""
        return self.value != 0


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
