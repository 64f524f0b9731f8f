"""
Entity <-> DTO mapping.

Each entity/DTO pair is described once by a field-correspondence table.
``to_dto`` is a full read projection: every field is copied and loaded
relationships listed as expansions are mapped recursively.  ``to_entity``
is a flat write projection: fields are copied back, expansions are dropped.
"""

from typing import Generic, Iterable, Mapping, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect

from genai_audit.models.db import (
    Base,
    GenAICitation,
    GenAIConversation,
    GenAIConversationType,
    GenAIMessage,
    GenAIModel,
    GenAISystemPromptOverride,
    GenAIUserFeedback,
)
from genai_audit.schemas import (
    CitationDTO,
    ConversationDTO,
    ConversationTypeDTO,
    MessageDTO,
    ModelDTO,
    SystemPromptOverrideDTO,
    UserFeedbackDTO,
)

EntityT = TypeVar("EntityT", bound=Base)
DTOT = TypeVar("DTOT", bound=BaseModel)

AUDIT_FIELDS = ("created_by", "created_at", "modified_by", "modified_at", "is_deleted")


class EntityMapper(Generic[EntityT, DTOT]):
    """Bidirectional field copier between one entity class and one DTO class."""

    def __init__(
        self,
        entity_cls: type[EntityT],
        dto_cls: type[DTOT],
        fields: Iterable[str],
        expansions: Optional[Mapping[str, "EntityMapper"]] = None,
    ):
        self.entity_cls = entity_cls
        self.dto_cls = dto_cls
        self.fields = tuple(fields) + AUDIT_FIELDS
        self.expansions = dict(expansions or {})

    def to_dto(self, entity: EntityT) -> DTOT:
        """
        Project an entity onto its DTO.

        Relationships that were never loaded on the instance are skipped, so
        mapping never triggers a lazy load and the expansion stays unset.
        """
        values = {name: getattr(entity, name) for name in self.fields}
        unloaded = inspect(entity).unloaded
        for attr, mapper in self.expansions.items():
            if attr in unloaded:
                continue
            related = getattr(entity, attr)
            if related is not None:
                values[attr] = mapper.to_dto(related)
        return self.dto_cls(**values)

    def to_entity(self, dto: DTOT) -> EntityT:
        """Build a new, transient entity from a DTO (expansions are not copied)."""
        return self.entity_cls(**{name: getattr(dto, name) for name in self.fields})

    def __repr__(self) -> str:
        return (
            f"<EntityMapper({self.entity_cls.__name__} <-> {self.dto_cls.__name__})>"
        )


model_mapper: EntityMapper[GenAIModel, ModelDTO] = EntityMapper(
    GenAIModel,
    ModelDTO,
    ("id", "name", "provider", "version", "license", "is_active"),
)

conversation_type_mapper: EntityMapper[
    GenAIConversationType, ConversationTypeDTO
] = EntityMapper(
    GenAIConversationType,
    ConversationTypeDTO,
    (
        "id",
        "name",
        "default_system_prompt",
        "version",
        "is_active",
        "risk_level",
        "use_case_category",
    ),
)

conversation_mapper: EntityMapper[GenAIConversation, ConversationDTO] = EntityMapper(
    GenAIConversation,
    ConversationDTO,
    ("id", "user_id", "conversation_type_id", "started_at"),
    expansions={"conversation_type": conversation_type_mapper},
)

system_prompt_override_mapper: EntityMapper[
    GenAISystemPromptOverride, SystemPromptOverrideDTO
] = EntityMapper(
    GenAISystemPromptOverride,
    SystemPromptOverrideDTO,
    (
        "id",
        "conversation_id",
        "overridden_prompt",
        "prompt_type",
        "reason_for_override",
        "version",
        "set_at",
    ),
)

message_mapper: EntityMapper[GenAIMessage, MessageDTO] = EntityMapper(
    GenAIMessage,
    MessageDTO,
    (
        "id",
        "conversation_id",
        "sender",
        "message_sequence",
        "content",
        "relevance_percentage",
        "model_id",
        "was_decision_made",
        "requires_human_review",
        "is_final_output",
    ),
    expansions={"model": model_mapper},
)

citation_mapper: EntityMapper[GenAICitation, CitationDTO] = EntityMapper(
    GenAICitation,
    CitationDTO,
    ("id", "message_id", "source_url", "description"),
)

user_feedback_mapper: EntityMapper[GenAIUserFeedback, UserFeedbackDTO] = EntityMapper(
    GenAIUserFeedback,
    UserFeedbackDTO,
    (
        "id",
        "message_id",
        "rating",
        "feedback_type",
        "comments",
        "feedback_source",
        "submitted_by",
        "submitted_at",
    ),
)
