"""Initial GenAI audit schema

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18

Creates the model registry, conversation types, conversations, system
prompt overrides, messages, citations and user feedback tables. Every
table carries the audit columns (created/modified by/at, is_deleted).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("modified_by", sa.String(255), nullable=True),
        sa.Column("modified_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "genai_models",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("provider", sa.String(100), nullable=True),
        sa.Column("version", sa.String(50), nullable=True),
        sa.Column("license", sa.String(100), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_audit_columns(),
    )
    op.create_index("ix_genai_models_is_deleted", "genai_models", ["is_deleted"])

    op.create_table(
        "genai_conversation_types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("default_system_prompt", sa.Text(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("risk_level", sa.String(10), nullable=True),  # Low | Medium | High
        sa.Column("use_case_category", sa.String(100), nullable=True),
        *_audit_columns(),
    )
    op.create_index(
        "ix_genai_conversation_types_name", "genai_conversation_types", ["name"]
    )
    op.create_index(
        "ix_genai_conversation_types_is_deleted",
        "genai_conversation_types",
        ["is_deleted"],
    )

    op.create_table(
        "genai_conversations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column(
            "conversation_type_id",
            sa.Integer(),
            sa.ForeignKey("genai_conversation_types.id"),
            nullable=False,
        ),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=False),
        *_audit_columns(),
    )
    op.create_index(
        "ix_genai_conversations_user_id", "genai_conversations", ["user_id"]
    )
    op.create_index(
        "ix_genai_conversations_conversation_type_id",
        "genai_conversations",
        ["conversation_type_id"],
    )
    op.create_index(
        "ix_genai_conversations_is_deleted", "genai_conversations", ["is_deleted"]
    )

    op.create_table(
        "genai_system_prompt_overrides",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "conversation_id",
            sa.Uuid(),
            sa.ForeignKey("genai_conversations.id"),
            nullable=False,
        ),
        sa.Column("overridden_prompt", sa.Text(), nullable=False),
        sa.Column("prompt_type", sa.String(50), nullable=True),
        sa.Column("reason_for_override", sa.Text(), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("set_at", sa.DateTime(timezone=True), nullable=False),
        *_audit_columns(),
    )
    op.create_index(
        "ix_genai_system_prompt_overrides_conversation_id",
        "genai_system_prompt_overrides",
        ["conversation_id"],
    )
    op.create_index(
        "ix_genai_system_prompt_overrides_is_deleted",
        "genai_system_prompt_overrides",
        ["is_deleted"],
    )

    op.create_table(
        "genai_messages",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "conversation_id",
            sa.Uuid(),
            sa.ForeignKey("genai_conversations.id"),
            nullable=False,
        ),
        sa.Column("sender", sa.String(20), nullable=False),  # user | assistant
        sa.Column("message_sequence", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("relevance_percentage", sa.Numeric(5, 2), nullable=True),
        sa.Column(
            "model_id",
            sa.Integer(),
            sa.ForeignKey("genai_models.id"),
            nullable=True,
        ),
        sa.Column("was_decision_made", sa.Boolean(), nullable=False),
        sa.Column("requires_human_review", sa.Boolean(), nullable=False),
        sa.Column("is_final_output", sa.Boolean(), nullable=False),
        *_audit_columns(),
    )
    op.create_index(
        "ix_genai_messages_conversation_sequence",
        "genai_messages",
        ["conversation_id", "message_sequence"],
    )
    op.create_index("ix_genai_messages_model_id", "genai_messages", ["model_id"])
    op.create_index("ix_genai_messages_is_deleted", "genai_messages", ["is_deleted"])

    op.create_table(
        "genai_citations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "message_id",
            sa.Uuid(),
            sa.ForeignKey("genai_messages.id"),
            nullable=False,
        ),
        sa.Column("source_url", sa.String(2048), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_audit_columns(),
    )
    op.create_index("ix_genai_citations_message_id", "genai_citations", ["message_id"])
    op.create_index("ix_genai_citations_is_deleted", "genai_citations", ["is_deleted"])

    op.create_table(
        "genai_user_feedback",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "message_id",
            sa.Uuid(),
            sa.ForeignKey("genai_messages.id"),
            nullable=False,
        ),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("feedback_type", sa.String(50), nullable=True),
        sa.Column("comments", sa.Text(), nullable=True),
        sa.Column("feedback_source", sa.String(50), nullable=True),
        sa.Column("submitted_by", sa.String(255), nullable=True),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False),
        *_audit_columns(),
    )
    op.create_index(
        "ix_genai_user_feedback_message_id", "genai_user_feedback", ["message_id"]
    )
    op.create_index(
        "ix_genai_user_feedback_is_deleted", "genai_user_feedback", ["is_deleted"]
    )


def downgrade() -> None:
    op.drop_table("genai_user_feedback")
    op.drop_table("genai_citations")
    op.drop_table("genai_messages")
    op.drop_table("genai_system_prompt_overrides")
    op.drop_table("genai_conversations")
    op.drop_table("genai_conversation_types")
    op.drop_table("genai_models")
