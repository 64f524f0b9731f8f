"""
Repository layer for database operations.

Provides soft-delete aware queries over the audit tables.
"""

from genai_audit.db.repositories.base import BaseRepository
from genai_audit.db.repositories.citation import CitationRepository
from genai_audit.db.repositories.conversation import ConversationRepository
from genai_audit.db.repositories.conversation_type import ConversationTypeRepository
from genai_audit.db.repositories.message import MessageRepository
from genai_audit.db.repositories.model import ModelRepository
from genai_audit.db.repositories.system_prompt_override import (
    SystemPromptOverrideRepository,
)
from genai_audit.db.repositories.user_feedback import UserFeedbackRepository

__all__ = [
    "BaseRepository",
    "CitationRepository",
    "ConversationRepository",
    "ConversationTypeRepository",
    "MessageRepository",
    "ModelRepository",
    "SystemPromptOverrideRepository",
    "UserFeedbackRepository",
]
