"""
Conversation repository.
"""

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from genai_audit.db.repositories.base import BaseRepository
from genai_audit.models.db import GenAIConversation


class ConversationRepository(BaseRepository[GenAIConversation]):
    """Repository for GenAIConversation."""

    def __init__(self, session: Session):
        super().__init__(GenAIConversation, session)

    def get_with_type(self, id: uuid.UUID) -> Optional[GenAIConversation]:
        """
        Get a conversation with its conversation type eager-loaded.

        Args:
            id: Conversation UUID

        Returns:
            Conversation or None if missing or soft-deleted
        """
        return (
            self._visible()
            .options(joinedload(GenAIConversation.conversation_type))
            .filter(GenAIConversation.id == id)
            .first()
        )

    def get_by_user(
        self,
        user_id: str,
        with_type: bool = True,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[GenAIConversation]:
        """
        Get conversations for a user, most recently started first.

        Args:
            user_id: User identity
            with_type: Eager-load the conversation type
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of conversations
        """
        query = self._visible().filter(GenAIConversation.user_id == user_id)
        if with_type:
            query = query.options(joinedload(GenAIConversation.conversation_type))
        query = query.order_by(GenAIConversation.started_at.desc()).offset(offset)
        if limit:
            query = query.limit(limit)
        return query.all()
