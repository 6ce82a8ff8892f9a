from .get_learning_item_use_case import GetLearningItemUseCase
from .get_learning_path_for_user_use_case import GetLearningPathForUserUseCase
from .get_learning_path_use_case import GetLearningPathUseCase
from .list_learning_paths_use_case import ListLearningPathsUseCase
from .store_learning_path_use_case import StoreLearningPathUseCase

__all__ = [
    "GetLearningItemUseCase",
    "GetLearningPathForUserUseCase",
    "GetLearningPathUseCase",
    "ListLearningPathsUseCase",
    "StoreLearningPathUseCase",
]
