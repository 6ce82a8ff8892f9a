"""Tests for loading learning paths, with and without a user's progress."""

from collections.abc import Callable

import pytest

from learnpath.core import Container
from learnpath.domain.common.value_objects import LearningPathId
from learnpath.domain.learning.entities import LearningItem, LearningPath, LearningSection
from learnpath.exceptions import (
    LearningItemNotFoundError,
    LearningPathNotFoundError,
    ValidationError,
)


def _submit(
    container: Container,
    path: LearningPath,
    user: str,
    completed_per_section: list[list[bool]],
) -> None:
    use_case = container.submit_item_feedback_use_case()
    for section, flags in zip(path.sections, completed_per_section, strict=False):
        for item, completed in zip(section.items, flags, strict=False):
            use_case.submit_feedback(path.id.value, item.id.value, user, 3, completed)


class TestGetLearningPathForUser:
    def test_three_of_four_completed(
        self, container: Container, path_factory: Callable[..., LearningPath]
    ) -> None:
        path = container.store_learning_path_use_case().store_learning_path(
            path_factory(items_per_section=(4,))
        )
        _submit(container, path, "alice", [[True, True, True, False]])

        loaded = container.get_learning_path_for_user_use_case().get_learning_path_for_user(
            path.id.value, "alice"
        )

        assert loaded.completion == 0.75
        assert [i.completed for i in loaded.sections[0].items] == [True, True, True, False]
        assert [i.user_rating for i in loaded.sections[0].items] == [3, 3, 3, 3]

    def test_path_completion_is_mean_of_sections(
        self, container: Container, path_factory: Callable[..., LearningPath]
    ) -> None:
        path = container.store_learning_path_use_case().store_learning_path(
            path_factory(items_per_section=(4, 2))
        )
        _submit(container, path, "alice", [[True, False, False, False], [True, True]])

        loaded = container.get_learning_path_for_user_use_case().get_learning_path_for_user(
            path.id.value, "alice"
        )

        assert loaded.completion == pytest.approx((0.25 + 1.0) / 2)

    def test_other_users_feedback_ignored(
        self, container: Container, path_factory: Callable[..., LearningPath]
    ) -> None:
        path = container.store_learning_path_use_case().store_learning_path(
            path_factory(items_per_section=(2,))
        )
        _submit(container, path, "bob", [[True, True]])

        loaded = container.get_learning_path_for_user_use_case().get_learning_path_for_user(
            path.id.value, "alice"
        )

        assert loaded.completion == 0.0
        assert all(item.user_rating is None for item in loaded.sections[0].items)
        # Aggregates still include everybody's ratings
        assert [item.rating_count for item in loaded.sections[0].items] == [1, 1]

    def test_empty_section_does_not_count(
        self, container: Container, path_factory: Callable[..., LearningPath]
    ) -> None:
        path = path_factory(items_per_section=(2,))
        path.sections.append(LearningSection.create(name="Coming soon", sequence=99))
        path = container.store_learning_path_use_case().store_learning_path(path)
        _submit(container, path, "alice", [[True, False]])

        loaded = container.get_learning_path_for_user_use_case().get_learning_path_for_user(
            path.id.value, "alice"
        )

        assert loaded.completion == 0.5

    def test_path_without_items_has_no_completion(self, container: Container) -> None:
        path = LearningPath.create(id=LearningPathId(7), name="Empty")
        container.store_learning_path_use_case().store_learning_path(path)

        loaded = container.get_learning_path_for_user_use_case().get_learning_path_for_user(
            7, "alice"
        )

        assert loaded.completion is None

    def test_new_item_does_not_inherit_feedback_of_removed_item(
        self, container: Container, path_factory: Callable[..., LearningPath]
    ) -> None:
        path = container.store_learning_path_use_case().store_learning_path(
            path_factory(items_per_section=(2,))
        )
        _submit(container, path, "alice", [[False, True]])

        edited = container.get_learning_path_use_case().get_learning_path(path.id.value)
        edited.sections[0].items[1:] = [LearningItem.create(name="Replacement", sequence=30)]
        container.store_learning_path_use_case().store_learning_path(edited)

        loaded = container.get_learning_path_for_user_use_case().get_learning_path_for_user(
            path.id.value, "alice"
        )

        replacement = loaded.sections[0].items[1]
        assert replacement.name == "Replacement"
        assert replacement.completed is None
        assert replacement.user_rating is None
        assert loaded.completion == 0.0

    def test_completion_is_not_persisted(
        self, container: Container, path_factory: Callable[..., LearningPath]
    ) -> None:
        path = container.store_learning_path_use_case().store_learning_path(
            path_factory(items_per_section=(1,))
        )
        _submit(container, path, "alice", [[True]])
        container.get_learning_path_for_user_use_case().get_learning_path_for_user(
            path.id.value, "alice"
        )

        loaded = container.get_learning_path_use_case().get_learning_path(path.id.value)

        assert loaded.completion is None
        assert loaded.sections[0].items[0].completed is None

    def test_unknown_path(self, container: Container) -> None:
        with pytest.raises(LearningPathNotFoundError):
            container.get_learning_path_for_user_use_case().get_learning_path_for_user(
                404, "alice"
            )

    def test_empty_user(self, container: Container) -> None:
        with pytest.raises(ValidationError):
            container.get_learning_path_for_user_use_case().get_learning_path_for_user(1, " ")


class TestListAndLoad:
    def test_list_learning_paths(
        self, container: Container, path_factory: Callable[..., LearningPath]
    ) -> None:
        store_use_case = container.store_learning_path_use_case()
        store_use_case.store_learning_path(path_factory(path_id=1, name="Zig"))
        store_use_case.store_learning_path(path_factory(path_id=2, name="C"))

        summaries = container.list_learning_paths_use_case().list_learning_paths()

        assert [(s.id.value, s.name) for s in summaries] == [(2, "C"), (1, "Zig")]

    def test_unknown_item(self, container: Container) -> None:
        with pytest.raises(LearningItemNotFoundError):
            container.get_learning_item_use_case().get_learning_item(404)

    def test_edit_after_feedback_keeps_aggregates(
        self, container: Container, path_factory: Callable[..., LearningPath]
    ) -> None:
        path = container.store_learning_path_use_case().store_learning_path(
            path_factory(items_per_section=(2,))
        )
        _submit(container, path, "alice", [[True, True]])

        loaded = container.get_learning_path_use_case().get_learning_path(path.id.value)
        loaded.sections[0].items[1].name = "Renamed item"
        container.store_learning_path_use_case().store_learning_path(loaded)

        reloaded = container.get_learning_path_use_case().get_learning_path(path.id.value)
        assert reloaded.sections[0].items[1].name == "Renamed item"
        assert [i.rating_count for i in reloaded.sections[0].items] == [1, 1]
