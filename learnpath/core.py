from dependency_injector import containers, providers

from learnpath.application.learning.use_cases.item_feedback import (
    GetItemFeedbackUseCase,
    SubmitItemFeedbackUseCase,
)
from learnpath.application.learning.use_cases.learning_paths import (
    GetLearningItemUseCase,
    GetLearningPathForUserUseCase,
    GetLearningPathUseCase,
    ListLearningPathsUseCase,
    StoreLearningPathUseCase,
)
from learnpath.application.ports import DocumentStoreProtocol
from learnpath.config import get_settings
from learnpath.domain.learning.services import CompletionService, RatingAggregationService
from learnpath.infrastructure.learning.repositories import (
    ItemFeedbackRepository,
    LearningPathRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Provided at runtime, e.g. by database.document_store_scope()
    document_store = providers.Dependency(instance_of=DocumentStoreProtocol)

    settings = providers.Singleton(get_settings)

    # Repositories
    learning_path_repository = providers.Factory(
        LearningPathRepository,
        document_store=document_store,
    )
    item_feedback_repository = providers.Factory(
        ItemFeedbackRepository,
        document_store=document_store,
    )

    # Domain services (pure domain logic, no store)
    completion_service = providers.Factory(CompletionService)
    rating_aggregation_service = providers.Factory(RatingAggregationService)

    # Learning module, application use cases
    list_learning_paths_use_case = providers.Factory(
        ListLearningPathsUseCase,
        learning_path_repository=learning_path_repository,
    )
    get_learning_path_use_case = providers.Factory(
        GetLearningPathUseCase,
        learning_path_repository=learning_path_repository,
    )
    get_learning_path_for_user_use_case = providers.Factory(
        GetLearningPathForUserUseCase,
        learning_path_repository=learning_path_repository,
        item_feedback_repository=item_feedback_repository,
        completion_service=completion_service,
    )
    store_learning_path_use_case = providers.Factory(
        StoreLearningPathUseCase,
        learning_path_repository=learning_path_repository,
    )
    get_learning_item_use_case = providers.Factory(
        GetLearningItemUseCase,
        learning_path_repository=learning_path_repository,
    )
    submit_item_feedback_use_case = providers.Factory(
        SubmitItemFeedbackUseCase,
        learning_path_repository=learning_path_repository,
        item_feedback_repository=item_feedback_repository,
        rating_aggregation_service=rating_aggregation_service,
        rating_min=settings.provided.RATING_MIN,
        rating_max=settings.provided.RATING_MAX,
    )
    get_item_feedback_use_case = providers.Factory(
        GetItemFeedbackUseCase,
        item_feedback_repository=item_feedback_repository,
    )


container = Container()
