"""
Access service for conversation types.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from genai_audit.db.repositories.conversation_type import ConversationTypeRepository
from genai_audit.mapping import conversation_type_mapper
from genai_audit.models.db import GenAIConversationType
from genai_audit.schemas import ConversationTypeDTO
from genai_audit.services.base import AuditedService


class ConversationTypeService(
    AuditedService[GenAIConversationType, ConversationTypeDTO]
):
    """Conversation types and their default system prompts."""

    entity_name = "conversation type"
    mutable_fields = (
        "name",
        "default_system_prompt",
        "version",
        "is_active",
        "risk_level",
        "use_case_category",
    )

    def __init__(self, session: Session):
        super().__init__(ConversationTypeRepository(session), conversation_type_mapper)

    def list_conversation_types(self) -> List[ConversationTypeDTO]:
        return self.list_all()

    def list_active_conversation_types(self) -> List[ConversationTypeDTO]:
        return self._to_dtos(self.repository.get_active_types())

    def get_by_name(self, name: str) -> Optional[ConversationTypeDTO]:
        """Get the highest version of a conversation type by name."""
        entity = self.repository.get_by_name(name)
        return self.mapper.to_dto(entity) if entity else None

    def create_conversation_type(self, dto: ConversationTypeDTO) -> Optional[int]:
        return self.create(dto)
