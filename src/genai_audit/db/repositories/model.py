"""
GenAI model repository.
"""

from typing import List

from sqlalchemy.orm import Session

from genai_audit.db.repositories.base import BaseRepository
from genai_audit.models.db import GenAIModel


class ModelRepository(BaseRepository[GenAIModel]):
    """Repository for GenAIModel."""

    def __init__(self, session: Session):
        super().__init__(GenAIModel, session)

    def get_active_models(self) -> List[GenAIModel]:
        """
        Get models flagged as active.

        Returns:
            List of active, non-deleted models ordered by name
        """
        return (
            self._visible()
            .filter(GenAIModel.is_active == True)  # noqa: E712
            .order_by(GenAIModel.name)
            .all()
        )
