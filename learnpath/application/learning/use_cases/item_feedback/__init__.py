from .get_item_feedback_use_case import GetItemFeedbackUseCase
from .submit_item_feedback_use_case import SubmitItemFeedbackUseCase

__all__ = [
    "GetItemFeedbackUseCase",
    "SubmitItemFeedbackUseCase",
]
