"""Tests for learning path domain entities."""

import pytest

from learnpath.domain.common.exceptions import DomainError, InvariantViolationError
from learnpath.domain.common.value_objects import (
    ItemFeedbackId,
    LearningItemId,
    LearningPathId,
    LearningSectionId,
    UserId,
)
from learnpath.domain.learning.entities import (
    ItemFeedback,
    LearningItem,
    LearningPath,
    LearningSection,
)


def _item(id: int, sequence: int, **kwargs: object) -> LearningItem:
    return LearningItem(id=LearningItemId(id), name=f"Item {id}", sequence=sequence, **kwargs)


class TestIds:
    def test_negative_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be non-negative"):
            LearningPathId(-1)

    def test_bool_id_rejected(self) -> None:
        with pytest.raises(TypeError):
            LearningItemId(True)

    def test_generate_is_unassigned(self) -> None:
        assert LearningSectionId.generate().is_assigned() is False
        assert LearningSectionId(3).is_assigned() is True

    def test_ids_of_different_kinds_are_not_equal(self) -> None:
        assert LearningItemId(5) != LearningSectionId(5)

    def test_empty_user_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="UserId cannot be empty"):
            UserId("  ")


class TestLearningItem:
    def test_average_rating_undefined_without_ratings(self) -> None:
        assert _item(1, 1).average_rating is None

    def test_average_rating(self) -> None:
        item = _item(1, 1, rating_count=4, rating_total=14)
        assert item.average_rating == 3.5

    def test_empty_name_raises_error(self) -> None:
        with pytest.raises(DomainError, match="name cannot be empty"):
            LearningItem.create(name="   ", sequence=1)

    def test_non_integer_sequence_raises_error(self) -> None:
        with pytest.raises(DomainError, match="sequence must be an integer"):
            LearningItem(id=LearningItemId(1), name="Item", sequence="1")  # type: ignore[arg-type]

    def test_negative_rating_count_raises_error(self) -> None:
        with pytest.raises(DomainError, match="rating count cannot be negative"):
            _item(1, 1, rating_count=-1)

    def test_apply_rating_delta(self) -> None:
        item = _item(1, 1, rating_count=2, rating_total=7)
        item.apply_rating_delta(1, 4)
        assert (item.rating_count, item.rating_total) == (3, 11)

    def test_apply_rating_delta_cannot_go_negative(self) -> None:
        item = _item(1, 1)
        with pytest.raises(InvariantViolationError):
            item.apply_rating_delta(-1, 0)

    def test_apply_user_feedback(self) -> None:
        item = _item(7, 1)
        assert item.has_user_state is False
        feedback = ItemFeedback(
            id=ItemFeedbackId(1),
            learning_path_id=LearningPathId(1),
            learning_section_id=LearningSectionId(2),
            learning_item_id=LearningItemId(7),
            user_id=UserId("alice"),
            rating=4,
            completed=True,
        )
        item.apply_user_feedback(feedback)
        assert item.user_rating == 4
        assert item.completed is True
        assert item.has_user_state is True

    def test_equality_by_identity(self) -> None:
        assert _item(1, 1) == _item(1, 99)
        assert _item(1, 1) != _item(2, 1)


class TestLearningSection:
    def test_get_item_by_id(self) -> None:
        section = LearningSection(
            id=LearningSectionId(1), name="S", sequence=1, items=[_item(1, 1), _item(2, 2)]
        )
        assert section.get_item_by_id(LearningItemId(2)) is section.items[1]
        assert section.get_item_by_id(LearningItemId(3)) is None

    def test_duplicate_item_sequences(self) -> None:
        section = LearningSection.create(
            name="S",
            sequence=1,
            items=[_item(1, 5), _item(2, 5), _item(3, 6), _item(4, 6), _item(5, 7)],
        )
        assert section.duplicate_item_sequences() == [5, 6]


class TestLearningPath:
    def test_create_strips_name(self) -> None:
        path = LearningPath.create(id=LearningPathId(1), name="  Rust  ")
        assert path.name == "Rust"
        assert path.completion is None

    def test_empty_name_raises_error(self) -> None:
        with pytest.raises(DomainError, match="name cannot be empty"):
            LearningPath.create(id=LearningPathId(1), name="")

    def test_duplicate_section_sequences(self) -> None:
        path = LearningPath.create(
            id=LearningPathId(1),
            name="P",
            sections=[
                LearningSection.create(name="A", sequence=1),
                LearningSection.create(name="B", sequence=1),
                LearningSection.create(name="C", sequence=2),
            ],
        )
        assert path.duplicate_section_sequences() == [1]

    def test_find_item_across_sections(self) -> None:
        target = _item(9, 1)
        path = LearningPath.create(
            id=LearningPathId(1),
            name="P",
            sections=[
                LearningSection.create(name="A", sequence=1, items=[_item(8, 1)]),
                LearningSection.create(name="B", sequence=2, items=[target]),
            ],
        )
        assert path.find_item(LearningItemId(9)) is target
        assert len(path.iter_items()) == 2
        assert path.summary().name == "P"


class TestItemFeedback:
    def test_bool_rating_rejected(self) -> None:
        with pytest.raises(DomainError, match="rating must be an integer"):
            ItemFeedback.create(
                learning_path_id=LearningPathId(1),
                learning_section_id=LearningSectionId(1),
                learning_item_id=LearningItemId(1),
                user_id=UserId("bob"),
                rating=True,
                completed=False,
            )

    def test_create_is_unassigned(self) -> None:
        feedback = ItemFeedback.create(
            learning_path_id=LearningPathId(1),
            learning_section_id=LearningSectionId(1),
            learning_item_id=LearningItemId(1),
            user_id=UserId("bob"),
            rating=2,
            completed=False,
        )
        assert feedback.id.is_assigned() is False
        assert (feedback.rating, feedback.completed) == (2, False)
