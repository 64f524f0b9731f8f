"""
User feedback repository.
"""

import uuid
from typing import List

from sqlalchemy.orm import Session

from genai_audit.db.repositories.base import BaseRepository
from genai_audit.models.db import GenAIUserFeedback


class UserFeedbackRepository(BaseRepository[GenAIUserFeedback]):
    """Repository for GenAIUserFeedback."""

    def __init__(self, session: Session):
        super().__init__(GenAIUserFeedback, session)

    def get_by_message(self, message_id: uuid.UUID) -> List[GenAIUserFeedback]:
        """
        Get feedback for a message, oldest submission first.

        Args:
            message_id: Message UUID

        Returns:
            List of feedback entries
        """
        return (
            self._visible()
            .filter(GenAIUserFeedback.message_id == message_id)
            .order_by(GenAIUserFeedback.submitted_at, GenAIUserFeedback.id)
            .all()
        )
