from .item_feedback_repository import ItemFeedbackRepositoryProtocol
from .learning_path_repository import LearningPathRepositoryProtocol

__all__ = [
    "ItemFeedbackRepositoryProtocol",
    "LearningPathRepositoryProtocol",
]
