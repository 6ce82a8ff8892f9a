from .item_feedback import ItemFeedback
from .learning_item import LearningItem
from .learning_path import LearningPath, LearningPathSummary
from .learning_section import LearningSection

__all__ = [
    "ItemFeedback",
    "LearningItem",
    "LearningPath",
    "LearningPathSummary",
    "LearningSection",
]
