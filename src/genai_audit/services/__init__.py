"""
Access services for the GenAI audit trail.

Each service is bound to one Session and exchanges DTOs with its caller.
"""

from genai_audit.services.base import AuditedService, MutationResult
from genai_audit.services.citation_service import CitationService
from genai_audit.services.conversation_service import ConversationService
from genai_audit.services.conversation_type_service import ConversationTypeService
from genai_audit.services.message_service import MessageService
from genai_audit.services.model_service import ModelService
from genai_audit.services.system_prompt_override_service import (
    SystemPromptOverrideService,
)
from genai_audit.services.user_feedback_service import UserFeedbackService

__all__ = [
    "AuditedService",
    "CitationService",
    "ConversationService",
    "ConversationTypeService",
    "MessageService",
    "ModelService",
    "MutationResult",
    "SystemPromptOverrideService",
    "UserFeedbackService",
]
