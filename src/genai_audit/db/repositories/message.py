"""
Message repository.
"""

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from genai_audit.db.repositories.base import BaseRepository
from genai_audit.models.db import GenAIMessage


class MessageRepository(BaseRepository[GenAIMessage]):
    """Repository for GenAIMessage."""

    def __init__(self, session: Session):
        super().__init__(GenAIMessage, session)

    def get_with_model(self, id: uuid.UUID) -> Optional[GenAIMessage]:
        """Get a message with its model eager-loaded."""
        return (
            self._visible()
            .options(joinedload(GenAIMessage.model))
            .filter(GenAIMessage.id == id)
            .first()
        )

    def get_by_conversation(
        self, conversation_id: uuid.UUID, with_model: bool = True
    ) -> List[GenAIMessage]:
        """
        Get messages for a conversation ordered by message sequence.

        Args:
            conversation_id: Conversation UUID
            with_model: Eager-load the model that produced each message

        Returns:
            List of messages, lowest sequence first
        """
        query = self._visible().filter(GenAIMessage.conversation_id == conversation_id)
        if with_model:
            query = query.options(joinedload(GenAIMessage.model))
        return query.order_by(GenAIMessage.message_sequence).all()

    def count_by_conversation(self, conversation_id: uuid.UUID) -> int:
        """Count messages in a conversation."""
        return (
            self._visible()
            .filter(GenAIMessage.conversation_id == conversation_id)
            .count()
        )
