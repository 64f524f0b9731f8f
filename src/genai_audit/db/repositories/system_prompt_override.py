"""
System prompt override repository.
"""

import uuid
from typing import List

from sqlalchemy.orm import Session

from genai_audit.db.repositories.base import BaseRepository
from genai_audit.models.db import GenAISystemPromptOverride


class SystemPromptOverrideRepository(BaseRepository[GenAISystemPromptOverride]):
    """Repository for GenAISystemPromptOverride."""

    def __init__(self, session: Session):
        super().__init__(GenAISystemPromptOverride, session)

    def get_by_conversation(
        self, conversation_id: uuid.UUID
    ) -> List[GenAISystemPromptOverride]:
        """
        Get overrides for a conversation in the order they were set.

        Args:
            conversation_id: Conversation UUID

        Returns:
            List of overrides
        """
        return (
            self._visible()
            .filter(GenAISystemPromptOverride.conversation_id == conversation_id)
            .order_by(GenAISystemPromptOverride.set_at, GenAISystemPromptOverride.id)
            .all()
        )
