"""
Access service for conversations.

Reads eager-load the conversation type so the returned DTOs carry the
``conversation_type`` expansion.
"""

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from genai_audit.db.repositories.conversation import ConversationRepository
from genai_audit.mapping import conversation_mapper
from genai_audit.models.db import GenAIConversation
from genai_audit.schemas import ConversationDTO
from genai_audit.services.base import AuditedService, MutationResult


class ConversationService(AuditedService[GenAIConversation, ConversationDTO]):
    """Conversation sessions."""

    entity_name = "conversation"
    mutable_fields = ("user_id", "conversation_type_id", "started_at")

    def __init__(self, session: Session):
        super().__init__(ConversationRepository(session), conversation_mapper)

    def _load(self, id: uuid.UUID) -> Optional[GenAIConversation]:
        return self.repository.get_with_type(id)

    def get_conversations_by_user(self, user_id: str) -> List[ConversationDTO]:
        """
        List a user's conversations, most recently started first.

        Args:
            user_id: User identity

        Returns:
            Non-deleted conversations with their conversation type expanded
        """
        return self._to_dtos(self.repository.get_by_user(user_id, with_type=True))

    def create_conversation(self, dto: ConversationDTO) -> uuid.UUID:
        """
        Start a conversation.

        ``started_at`` defaults to the creation time when unset.
        """
        return self.create(dto)

    def update_conversation(self, dto: ConversationDTO) -> MutationResult:
        return self.update(dto)
