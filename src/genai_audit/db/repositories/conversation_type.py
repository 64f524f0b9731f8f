"""
Conversation type repository.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from genai_audit.db.repositories.base import BaseRepository
from genai_audit.models.db import GenAIConversationType


class ConversationTypeRepository(BaseRepository[GenAIConversationType]):
    """Repository for GenAIConversationType."""

    def __init__(self, session: Session):
        super().__init__(GenAIConversationType, session)

    def get_by_name(self, name: str) -> Optional[GenAIConversationType]:
        """
        Get conversation type by exact name.

        Args:
            name: Conversation type name

        Returns:
            Latest version of the conversation type, or None
        """
        return (
            self._visible()
            .filter(GenAIConversationType.name == name)
            .order_by(GenAIConversationType.version.desc())
            .first()
        )

    def get_active_types(self) -> List[GenAIConversationType]:
        """Get conversation types flagged as active."""
        return (
            self._visible()
            .filter(GenAIConversationType.is_active == True)  # noqa: E712
            .order_by(GenAIConversationType.name)
            .all()
        )
