"""
Access service for system prompt overrides.
"""

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from genai_audit.db.repositories.system_prompt_override import (
    SystemPromptOverrideRepository,
)
from genai_audit.mapping import system_prompt_override_mapper
from genai_audit.models.db import GenAISystemPromptOverride
from genai_audit.schemas import SystemPromptOverrideDTO
from genai_audit.services.base import AuditedService


class SystemPromptOverrideService(
    AuditedService[GenAISystemPromptOverride, SystemPromptOverrideDTO]
):
    """Per-conversation system prompt overrides."""

    entity_name = "system prompt override"
    mutable_fields = (
        "overridden_prompt",
        "prompt_type",
        "reason_for_override",
        "version",
        "set_at",
    )

    def __init__(self, session: Session):
        super().__init__(
            SystemPromptOverrideRepository(session), system_prompt_override_mapper
        )

    def get_overrides_by_conversation(
        self, conversation_id: uuid.UUID
    ) -> List[SystemPromptOverrideDTO]:
        return self._to_dtos(self.repository.get_by_conversation(conversation_id))

    def add_override(self, dto: SystemPromptOverrideDTO) -> Optional[int]:
        return self.create(dto)
