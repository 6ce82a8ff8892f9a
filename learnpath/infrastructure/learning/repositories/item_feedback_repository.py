"""Repository for ItemFeedback domain entities."""

from dataclasses import replace

import structlog

from learnpath.application.ports import KEY, DocumentStoreProtocol, EqualityFilter
from learnpath.domain.common.value_objects import (
    ItemFeedbackId,
    LearningItemId,
    LearningPathId,
    LearningSectionId,
    UserId,
)
from learnpath.domain.learning.entities import ItemFeedback
from learnpath.exceptions import ItemFeedbackNotFoundError
from learnpath.infrastructure.learning.mappers import ItemFeedbackMapper
from learnpath.infrastructure.learning.mappers.kinds import ITEM_FEEDBACK
from learnpath.infrastructure.learning.repositories.learning_path_repository import (
    map_documents,
)

logger = structlog.get_logger(__name__)


class ItemFeedbackRepository:
    """
    Repository for ItemFeedback domain entities.

    At most one feedback per (user, item) is kept by looking up before
    inserting. Storage has no uniqueness constraint, so two concurrent first
    submissions for the same pair can still both insert.
    """

    def __init__(self, document_store: DocumentStoreProtocol) -> None:
        self.document_store = document_store
        self.mapper = ItemFeedbackMapper()

    def find(self, user_id: UserId, item_id: LearningItemId) -> ItemFeedback | None:
        """
        Find a user's feedback on an item.

        Returns:
            The matching feedback with the lowest id, or None
        """
        documents = self.document_store.query(
            ITEM_FEEDBACK,
            filters=[
                EqualityFilter("userId", user_id.value),
                EqualityFilter("learningItem", item_id.value),
            ],
            sort=KEY,
        )
        matches = map_documents(documents, self.mapper.to_domain)
        if len(matches) > 1:
            logger.warning(
                "duplicate_item_feedback",
                user_id=user_id.value,
                learning_item_id=item_id.value,
                feedback_ids=[fb.id.value for fb in matches],
            )
        return matches[0] if matches else None

    def get(self, feedback_id: ItemFeedbackId) -> ItemFeedback:
        """
        Fetch feedback by its own id.

        Raises:
            ItemFeedbackNotFoundError: If no feedback has that id
        """
        document = self.document_store.get(ITEM_FEEDBACK, feedback_id.value)
        if document is None:
            raise ItemFeedbackNotFoundError(feedback_id.value)
        return self.mapper.to_domain(document)

    def list_by_user_and_section(
        self, user_id: UserId, section_id: LearningSectionId
    ) -> list[ItemFeedback]:
        documents = self.document_store.query(
            ITEM_FEEDBACK,
            filters=[
                EqualityFilter("userId", user_id.value),
                EqualityFilter("learningSection", section_id.value),
            ],
        )
        return map_documents(documents, self.mapper.to_domain)

    def list_by_path(self, path_id: LearningPathId) -> list[ItemFeedback]:
        documents = self.document_store.query(
            ITEM_FEEDBACK,
            filters=[EqualityFilter("learningPath", path_id.value)],
            sort=KEY,
        )
        return map_documents(documents, self.mapper.to_domain)

    def list_by_item(self, item_id: LearningItemId) -> list[ItemFeedback]:
        documents = self.document_store.query(
            ITEM_FEEDBACK,
            filters=[EqualityFilter("learningItem", item_id.value)],
            sort=KEY,
        )
        return map_documents(documents, self.mapper.to_domain)

    def upsert(self, feedback: ItemFeedback) -> tuple[ItemFeedback, ItemFeedback | None]:
        """
        Insert feedback, or overwrite the user's existing feedback on the item.

        An existing record keeps its id; every other field is overwritten.

        Returns:
            (stored feedback, copy of the feedback before this call or None)
        """
        existing = self.find(feedback.user_id, feedback.learning_item_id)
        properties = self.mapper.to_properties(feedback)

        if existing is None:
            new_id = self.document_store.put(ITEM_FEEDBACK, properties)
            feedback.id = ItemFeedbackId(new_id)
            logger.info(
                "created_item_feedback",
                feedback_id=new_id,
                learning_item_id=feedback.learning_item_id.value,
            )
            return feedback, None

        previous = replace(existing)
        self.document_store.put(ITEM_FEEDBACK, properties, existing.id.value)
        feedback.id = existing.id
        logger.info(
            "updated_item_feedback",
            feedback_id=existing.id.value,
            learning_item_id=feedback.learning_item_id.value,
        )
        return feedback, previous
