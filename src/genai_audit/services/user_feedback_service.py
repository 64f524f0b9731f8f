"""
Access service for user feedback.

Ratings are stored as given; the 1-5 range and the existence of the rated
message are not checked at this layer.
"""

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from genai_audit.db.repositories.user_feedback import UserFeedbackRepository
from genai_audit.mapping import user_feedback_mapper
from genai_audit.models.db import GenAIUserFeedback
from genai_audit.schemas import UserFeedbackDTO
from genai_audit.services.base import AuditedService


class UserFeedbackService(AuditedService[GenAIUserFeedback, UserFeedbackDTO]):
    """Ratings and comments on messages."""

    entity_name = "user feedback"
    mutable_fields = ("rating", "feedback_type", "comments", "feedback_source")

    def __init__(self, session: Session):
        super().__init__(UserFeedbackRepository(session), user_feedback_mapper)

    def get_feedback_by_message(self, message_id: uuid.UUID) -> List[UserFeedbackDTO]:
        return self._to_dtos(self.repository.get_by_message(message_id))

    def submit_feedback(self, dto: UserFeedbackDTO) -> Optional[int]:
        return self.create(dto)
