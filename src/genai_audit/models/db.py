"""
SQLAlchemy database models for the GenAI audit trail.

These models represent the database schema for storing conversations,
messages, and the metadata around them (models, conversation types,
prompt overrides, citations, and user feedback).
"""

import enum
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
    false,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _utc_now() -> datetime:
    """Get current UTC time."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class RiskLevel(str, enum.Enum):
    """Risk classification of a conversation type."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Sender(str, enum.Enum):
    """Author of a message."""

    USER = "user"
    ASSISTANT = "assistant"


class AuditMixin:
    """Audit and soft-delete columns shared by every table."""

    created_by: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utc_now, nullable=False
    )
    modified_by: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    modified_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(), index=True
    )


class GenAIModel(AuditMixin, Base):
    """Registered LLM used to produce assistant messages."""

    __tablename__ = "genai_models"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    provider: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    version: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    license: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    messages: Mapped[list["GenAIMessage"]] = relationship(back_populates="model")

    def __repr__(self) -> str:
        return (
            f"<GenAIModel(id={self.id}, name={self.name!r}, "
            f"provider={self.provider!r})>"
        )


class GenAIConversationType(AuditMixin, Base):
    """Conversation template carrying the default system prompt and risk level."""

    __tablename__ = "genai_conversation_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    default_system_prompt: Mapped[str] = mapped_column(Text, nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    risk_level: Mapped[Optional[RiskLevel]] = mapped_column(
        Enum(
            RiskLevel,
            native_enum=False,
            values_callable=lambda x: [e.value for e in x],
            length=10,
        ),
        nullable=True,
    )
    use_case_category: Mapped[Optional[str]] = mapped_column(
        String(100), nullable=True
    )

    # Relationships
    conversations: Mapped[list["GenAIConversation"]] = relationship(
        back_populates="conversation_type"
    )

    def __repr__(self) -> str:
        return f"<GenAIConversationType(id={self.id}, name={self.name!r})>"


class GenAIConversation(AuditMixin, Base):
    """A user's conversation session."""

    __tablename__ = "genai_conversations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    conversation_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("genai_conversation_types.id"),
        nullable=False,
        index=True,
    )
    started_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utc_now, nullable=False
    )

    # Relationships
    conversation_type: Mapped["GenAIConversationType"] = relationship(
        back_populates="conversations"
    )
    messages: Mapped[list["GenAIMessage"]] = relationship(
        back_populates="conversation"
    )
    prompt_overrides: Mapped[list["GenAISystemPromptOverride"]] = relationship(
        back_populates="conversation"
    )

    def __repr__(self) -> str:
        return f"<GenAIConversation(id={self.id}, user_id={self.user_id!r})>"


class GenAISystemPromptOverride(AuditMixin, Base):
    """System prompt replaced for the lifetime of one conversation."""

    __tablename__ = "genai_system_prompt_overrides"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    conversation_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("genai_conversations.id"),
        nullable=False,
        index=True,
    )
    overridden_prompt: Mapped[str] = mapped_column(Text, nullable=False)
    prompt_type: Mapped[Optional[str]] = mapped_column(
        String(50), nullable=True
    )  # e.g. 'Temperature'
    reason_for_override: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    set_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utc_now, nullable=False
    )

    # Relationships
    conversation: Mapped["GenAIConversation"] = relationship(
        back_populates="prompt_overrides"
    )

    def __repr__(self) -> str:
        return (
            f"<GenAISystemPromptOverride(id={self.id}, "
            f"conversation_id={self.conversation_id})>"
        )


class GenAIMessage(AuditMixin, Base):
    """Individual message within a conversation."""

    __tablename__ = "genai_messages"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    conversation_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("genai_conversations.id"),
        nullable=False,
    )
    sender: Mapped[Sender] = mapped_column(
        Enum(
            Sender,
            native_enum=False,
            values_callable=lambda x: [e.value for e in x],
            length=20,
        ),
        nullable=False,
    )
    message_sequence: Mapped[int] = mapped_column(Integer, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    relevance_percentage: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(5, 2), nullable=True
    )
    model_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("genai_models.id"),
        nullable=True,
        index=True,
    )
    was_decision_made: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    requires_human_review: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    is_final_output: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )

    # Relationships
    conversation: Mapped["GenAIConversation"] = relationship(back_populates="messages")
    model: Mapped[Optional["GenAIModel"]] = relationship(back_populates="messages")
    citations: Mapped[list["GenAICitation"]] = relationship(back_populates="message")
    feedback: Mapped[list["GenAIUserFeedback"]] = relationship(
        back_populates="message"
    )

    __table_args__ = (
        Index(
            "ix_genai_messages_conversation_sequence",
            "conversation_id",
            "message_sequence",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<GenAIMessage(id={self.id}, sender={self.sender!r}, "
            f"sequence={self.message_sequence})>"
        )


class GenAICitation(AuditMixin, Base):
    """Source referenced by an assistant message."""

    __tablename__ = "genai_citations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    message_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("genai_messages.id"),
        nullable=False,
        index=True,
    )
    source_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    message: Mapped["GenAIMessage"] = relationship(back_populates="citations")

    def __repr__(self) -> str:
        return f"<GenAICitation(id={self.id}, source_url={self.source_url!r})>"


class GenAIUserFeedback(AuditMixin, Base):
    """User rating of a message (rating is expected in 1..5)."""

    __tablename__ = "genai_user_feedback"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    message_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("genai_messages.id"),
        nullable=False,
        index=True,
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    feedback_type: Mapped[Optional[str]] = mapped_column(
        String(50), nullable=True
    )  # 'thumbs_up', 'flagged', ...
    comments: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    feedback_source: Mapped[Optional[str]] = mapped_column(
        String(50), nullable=True
    )  # 'UI', 'API', 'Slack'
    submitted_by: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utc_now, nullable=False
    )

    # Relationships
    message: Mapped["GenAIMessage"] = relationship(back_populates="feedback")

    def __repr__(self) -> str:
        return f"<GenAIUserFeedback(id={self.id}, rating={self.rating})>"
