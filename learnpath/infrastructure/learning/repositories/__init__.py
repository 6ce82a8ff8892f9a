from .item_feedback_repository import ItemFeedbackRepository
from .learning_path_repository import LearningPathRepository

__all__ = [
    "ItemFeedbackRepository",
    "LearningPathRepository",
]
