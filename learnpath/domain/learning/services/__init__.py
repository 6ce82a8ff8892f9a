from .completion_service import CompletionService
from .rating_aggregation_service import RatingAggregationService, RatingDelta

__all__ = [
    "CompletionService",
    "RatingAggregationService",
    "RatingDelta",
]
