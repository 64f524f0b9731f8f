"""
Citation repository.
"""

import uuid
from typing import List

from sqlalchemy.orm import Session

from genai_audit.db.repositories.base import BaseRepository
from genai_audit.models.db import GenAICitation


class CitationRepository(BaseRepository[GenAICitation]):
    """Repository for GenAICitation."""

    def __init__(self, session: Session):
        super().__init__(GenAICitation, session)

    def get_by_message(self, message_id: uuid.UUID) -> List[GenAICitation]:
        """Get citations attached to a message."""
        return (
            self._visible()
            .filter(GenAICitation.message_id == message_id)
            .order_by(GenAICitation.id)
            .all()
        )
