"""
Incremental rating aggregation domain service.

An item stores ratingCount and ratingTotal instead of recomputing them from
every feedback record. Each submission therefore turns into a delta:

- first feedback of a user on the item: count +1, total +rating
- a user changing their feedback: count unchanged, total +(new - previous)

Every code path that changes a feedback rating must go through this
service, otherwise the stored aggregate drifts from the feedback records.
"""

from dataclasses import dataclass

from learnpath.domain.learning.entities.item_feedback import ItemFeedback
from learnpath.domain.learning.entities.learning_item import LearningItem


@dataclass(frozen=True)
class RatingDelta:
    """Change to apply to an item's rating aggregate."""

    count_delta: int
    total_delta: int


class RatingAggregationService:
    """Computes and applies rating aggregate deltas."""

    def compute_delta(self, previous: ItemFeedback | None, new_rating: int) -> RatingDelta:
        if previous is None:
            return RatingDelta(count_delta=1, total_delta=new_rating)
        return RatingDelta(count_delta=0, total_delta=new_rating - previous.rating)

    def apply(
        self, item: LearningItem, previous: ItemFeedback | None, new_rating: int
    ) -> RatingDelta:
        """Update the item's aggregate in place and return the delta used."""
        delta = self.compute_delta(previous, new_rating)
        item.apply_rating_delta(delta.count_delta, delta.total_delta)
        return delta
