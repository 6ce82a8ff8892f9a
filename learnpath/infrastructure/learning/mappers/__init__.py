from .item_feedback_mapper import ItemFeedbackMapper
from .learning_item_mapper import LearningItemMapper
from .learning_path_mapper import LearningPathMapper
from .learning_section_mapper import LearningSectionMapper

__all__ = [
    "ItemFeedbackMapper",
    "LearningItemMapper",
    "LearningPathMapper",
    "LearningSectionMapper",
]
