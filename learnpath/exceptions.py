"""Custom exception hierarchy for the learnpath application."""


class LearnPathError(Exception):
    """Base exception for all learnpath errors."""

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class NotFoundError(LearnPathError):
    """Requested record is absent from the store."""


class LearningPathNotFoundError(NotFoundError):
    """Learning path not found error."""

    def __init__(self, path_id: int) -> None:
        self.path_id = path_id
        super().__init__(f"Learning path with id {path_id} not found")


class LearningItemNotFoundError(NotFoundError):
    """Learning item not found error."""

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"Learning item with id {item_id} not found")


class ItemFeedbackNotFoundError(NotFoundError):
    """Item feedback not found error."""

    def __init__(self, feedback_id: int) -> None:
        self.feedback_id = feedback_id
        super().__init__(f"Item feedback with id {feedback_id} not found")


class ValidationError(LearnPathError):
    """Caller-supplied value outside the domain constraints."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        """Initialize with message and the offending field/value."""
        self.field = field
        self.value = value
        super().__init__(message)


class MappingError(LearnPathError):
    """A stored record is missing a property or has one of the wrong type."""

    def __init__(self, kind: str, entity_id: int | None, field: str | None, reason: str) -> None:
        """Initialize with the record's kind, id, failing field and reason."""
        self.kind = kind
        self.entity_id = entity_id
        self.field = field
        self.reason = reason
        location = f"{kind} {entity_id}" if entity_id is not None else kind
        if field:
            super().__init__(f"Cannot map {location}: property '{field}' {reason}")
        else:
            super().__init__(f"Cannot map {location}: {reason}")


class PartialWriteError(LearnPathError):
    """
    A multi-step write failed after some of its steps were persisted.

    The store exception is chained as __cause__. retry_safe tells the caller
    whether repeating the whole operation converges (full tree replace) or
    would double-apply (rating increment).
    """

    def __init__(
        self, operation: str, entity_id: int, *, retry_safe: bool, completed_steps: int
    ) -> None:
        """Initialize with operation name, target id and retry hint."""
        self.operation = operation
        self.entity_id = entity_id
        self.retry_safe = retry_safe
        self.completed_steps = completed_steps
        super().__init__(
            f"{operation} for id {entity_id} failed after {completed_steps} completed write(s)"
        )
