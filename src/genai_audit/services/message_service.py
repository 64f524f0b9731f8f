"""
Access service for conversation messages.

Messages are returned in ``message_sequence`` order with the producing model
expanded. Sequence uniqueness is not checked here.
"""

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from genai_audit.db.repositories.message import MessageRepository
from genai_audit.mapping import message_mapper
from genai_audit.models.db import GenAIMessage
from genai_audit.schemas import MessageDTO
from genai_audit.services.base import AuditedService


class MessageService(AuditedService[GenAIMessage, MessageDTO]):
    """Message log."""

    entity_name = "message"
    mutable_fields = (
        "content",
        "relevance_percentage",
        "model_id",
        "was_decision_made",
        "requires_human_review",
        "is_final_output",
    )

    def __init__(self, session: Session):
        super().__init__(MessageRepository(session), message_mapper)

    def _load(self, id: uuid.UUID) -> Optional[GenAIMessage]:
        return self.repository.get_with_model(id)

    def get_messages_by_conversation(
        self, conversation_id: uuid.UUID
    ) -> List[MessageDTO]:
        """
        Get the messages of a conversation.

        Args:
            conversation_id: Conversation UUID

        Returns:
            Non-deleted messages ordered by message_sequence ascending
        """
        return self._to_dtos(
            self.repository.get_by_conversation(conversation_id, with_model=True)
        )

    def count_messages_by_conversation(self, conversation_id: uuid.UUID) -> int:
        """Number of non-deleted messages in a conversation."""
        return self.repository.count_by_conversation(conversation_id)

    def add_message(self, dto: MessageDTO) -> uuid.UUID:
        return self.create(dto)
