"""
Transfer schemas for the GenAI audit trail.

Pydantic models exchanged with callers outside the storage boundary.
Nested expansions (ConversationDTO.conversation_type, MessageDTO.model)
are only set when the related row was loaded; an unset expansion is absent
from ``model_fields_set`` and from ``model_dump(exclude_unset=True)``.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from genai_audit.models.db import RiskLevel, Sender

# ===== Base Schemas =====


class AuditableDTO(BaseModel):
    """Audit / soft-delete fields shared by every DTO."""

    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    modified_by: Optional[str] = None
    modified_at: Optional[datetime] = None
    is_deleted: bool = False


# ===== Model Registry =====


class ModelDTO(AuditableDTO):
    """Registered LLM."""

    id: Optional[int] = None
    name: str
    provider: Optional[str] = None
    version: Optional[str] = None
    license: Optional[str] = None
    is_active: bool = True


# ===== Conversation Schemas =====


class ConversationTypeDTO(AuditableDTO):
    """Conversation type with its default system prompt."""

    id: Optional[int] = None
    name: str
    default_system_prompt: str
    version: int = 1
    is_active: bool = True
    risk_level: Optional[RiskLevel] = None
    use_case_category: Optional[str] = None


class ConversationDTO(AuditableDTO):
    """Conversation session."""

    id: Optional[UUID] = None
    user_id: str
    conversation_type_id: int
    started_at: Optional[datetime] = None

    # Optional expansion
    conversation_type: Optional[ConversationTypeDTO] = None


class SystemPromptOverrideDTO(AuditableDTO):
    """System prompt override applied to one conversation."""

    id: Optional[int] = None
    conversation_id: UUID
    overridden_prompt: str
    prompt_type: Optional[str] = None  # e.g. "Temperature"
    reason_for_override: Optional[str] = None
    version: int = 1
    set_at: Optional[datetime] = None


# ===== Message Schemas =====


class MessageDTO(AuditableDTO):
    """Message within a conversation."""

    model_config = ConfigDict(protected_namespaces=())

    id: Optional[UUID] = None
    conversation_id: UUID
    sender: Sender
    message_sequence: int
    content: str
    relevance_percentage: Optional[Decimal] = None
    model_id: Optional[int] = None
    was_decision_made: bool = False
    requires_human_review: bool = False
    is_final_output: bool = False

    # Optional expansion
    model: Optional[ModelDTO] = None


class CitationDTO(AuditableDTO):
    """Citation attached to a message."""

    id: Optional[int] = None
    message_id: UUID
    source_url: str
    description: Optional[str] = None


class UserFeedbackDTO(AuditableDTO):
    """User feedback on a message."""

    id: Optional[int] = None
    message_id: UUID
    rating: int  # 1-5, not validated
    feedback_type: Optional[str] = None  # thumbs_up, flagged, ...
    comments: Optional[str] = None
    feedback_source: Optional[str] = None  # UI, API, Slack
    submitted_by: Optional[str] = None
    submitted_at: Optional[datetime] = None
