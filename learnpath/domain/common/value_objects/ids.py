from dataclasses import dataclass

from ..entity import EntityId
from ..value_object import ValueObject


@dataclass(frozen=True)
class LearningPathId(EntityId):
    """Strongly-typed learning path identifier."""

    value: int


@dataclass(frozen=True)
class LearningSectionId(EntityId):
    """Strongly-typed learning section identifier."""

    value: int


@dataclass(frozen=True)
class LearningItemId(EntityId):
    """Strongly-typed learning item identifier."""

    value: int


@dataclass(frozen=True)
class ItemFeedbackId(EntityId):
    """Strongly-typed item feedback identifier."""

    value: int


@dataclass(frozen=True)
class UserId(ValueObject):
    """
    Opaque user identifier.

    Supplied by whatever authenticates the acting user; this layer only
    compares it for equality.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("UserId must be a string")
        if not self.value.strip():
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
