"""
Completion computation domain service.

Works on an already loaded tree plus a user's feedback records; it does not
touch the store.
"""

from collections.abc import Iterable

from learnpath.domain.learning.entities.item_feedback import ItemFeedback
from learnpath.domain.learning.entities.learning_path import LearningPath
from learnpath.domain.learning.entities.learning_section import LearningSection


class CompletionService:
    """
    Computes completion ratios for one user.

    - Section ratio: completed items / items in the section.
      A section without items has no ratio (None), not 0 and not NaN.
    - Path ratio: unweighted mean of the section ratios that exist.
      None when no section has a ratio.
    """

    def attach_feedback(
        self, section: LearningSection, feedback: Iterable[ItemFeedback]
    ) -> int:
        """
        Copy each feedback's rating and completed flag onto the matching item.

        Feedback for items that are not in the section is ignored.

        Returns:
            Number of feedback records that matched an item
        """
        matched = 0
        for fb in feedback:
            item = section.get_item_by_id(fb.learning_item_id)
            if item is None:
                continue
            item.apply_user_feedback(fb)
            matched += 1
        return matched

    def section_completion(self, section: LearningSection) -> float | None:
        if section.num_items == 0:
            return None
        completed = sum(1 for item in section.items if item.completed is True)
        return completed / section.num_items

    def path_completion(self, path: LearningPath) -> float | None:
        ratios = [
            ratio
            for ratio in (self.section_completion(section) for section in path.sections)
            if ratio is not None
        ]
        if not ratios:
            return None
        return sum(ratios) / len(ratios)
