"""
Tests for repository classes.
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from genai_audit.db.repositories import (
    CitationRepository,
    ConversationRepository,
    ConversationTypeRepository,
    MessageRepository,
    ModelRepository,
)
from genai_audit.models.db import (
    GenAICitation,
    GenAIConversation,
    GenAIConversationType,
    GenAIMessage,
    GenAIModel,
    Sender,
)


def _model(name: str, **kwargs) -> GenAIModel:
    kwargs.setdefault("is_active", True)
    return GenAIModel(name=name, created_at=datetime.now(UTC), **kwargs)


class TestBaseRepository:
    """Tests for the soft-delete aware base operations."""

    def test_add_assigns_id(self, db_session: Session):
        repo = ModelRepository(db_session)
        model = repo.add(_model("mistral-large"))

        assert model.id is not None
        assert model.is_deleted is False

    def test_get(self, db_session: Session, sample_model: GenAIModel):
        repo = ModelRepository(db_session)
        model = repo.get(sample_model.id)

        assert model is not None
        assert model.name == "gpt-4o"

    def test_get_nonexistent(self, db_session: Session):
        repo = ModelRepository(db_session)

        assert repo.get(999_999) is None

    def test_get_hides_deleted(self, db_session: Session, sample_model: GenAIModel):
        repo = ModelRepository(db_session)
        repo.soft_delete(sample_model, datetime.now(UTC))

        assert repo.get(sample_model.id) is None
        assert repo.get_including_deleted(sample_model.id) is sample_model

    def test_soft_delete_keeps_row(self, db_session: Session, sample_model: GenAIModel):
        repo = ModelRepository(db_session)
        deleted_at = datetime.now(UTC)
        repo.soft_delete(sample_model, deleted_at)

        row = db_session.get(GenAIModel, sample_model.id)
        assert row is not None
        assert row.is_deleted is True
        assert row.modified_at == deleted_at

    def test_get_all_and_count_skip_deleted(self, db_session: Session):
        repo = ModelRepository(db_session)
        initial_count = repo.count()
        keep = repo.add(_model("keep-me"))
        drop = repo.add(_model("drop-me"))
        repo.soft_delete(drop, datetime.now(UTC))

        names = [m.name for m in repo.get_all()]
        assert "keep-me" in names
        assert "drop-me" not in names
        assert repo.count() == initial_count + 1
        assert keep.id in [m.id for m in repo.get_all()]

    def test_get_all_pagination(self, db_session: Session):
        repo = ModelRepository(db_session)
        for i in range(5):
            repo.add(_model(f"model-{i}"))

        assert len(repo.get_all(limit=3)) == 3
        assert len(repo.get_all(limit=2, offset=2)) == 2


class TestModelRepository:
    """Tests for ModelRepository."""

    def test_get_active_models(self, db_session: Session):
        repo = ModelRepository(db_session)
        repo.add(_model("active-a"))
        repo.add(_model("inactive", is_active=False))
        deleted = repo.add(_model("active-deleted"))
        repo.soft_delete(deleted, datetime.now(UTC))

        names = [m.name for m in repo.get_active_models()]
        assert "active-a" in names
        assert "inactive" not in names
        assert "active-deleted" not in names


class TestConversationTypeRepository:
    """Tests for ConversationTypeRepository."""

    def test_get_by_name_returns_highest_version(self, db_session: Session):
        repo = ConversationTypeRepository(db_session)
        for version in (1, 3, 2):
            repo.add(
                GenAIConversationType(
                    name="Triage",
                    default_system_prompt=f"v{version}",
                    version=version,
                    is_active=True,
                    created_at=datetime.now(UTC),
                )
            )

        found = repo.get_by_name("Triage")
        assert found is not None
        assert found.version == 3

    def test_get_by_name_not_found(self, db_session: Session):
        repo = ConversationTypeRepository(db_session)

        assert repo.get_by_name("does-not-exist") is None


class TestConversationRepository:
    """Tests for ConversationRepository."""

    def test_get_with_type(
        self,
        db_session: Session,
        sample_conversation: GenAIConversation,
        sample_conversation_type: GenAIConversationType,
    ):
        db_session.expire_all()
        repo = ConversationRepository(db_session)
        conversation = repo.get_with_type(sample_conversation.id)

        assert conversation is not None
        assert "conversation_type" not in inspect(conversation).unloaded
        assert conversation.conversation_type.name == sample_conversation_type.name

    def test_get_by_user(
        self,
        db_session: Session,
        sample_conversation: GenAIConversation,
    ):
        repo = ConversationRepository(db_session)
        conversations = repo.get_by_user("user-42")

        assert [c.id for c in conversations] == [sample_conversation.id]

    def test_get_by_user_other_user(
        self, db_session: Session, sample_conversation: GenAIConversation
    ):
        repo = ConversationRepository(db_session)

        assert repo.get_by_user("someone-else") == []


class TestMessageRepository:
    """Tests for MessageRepository."""

    def test_get_by_conversation_orders_by_sequence(
        self, db_session: Session, sample_conversation: GenAIConversation
    ):
        repo = MessageRepository(db_session)
        for sequence in (3, 1, 2):
            repo.add(
                GenAIMessage(
                    id=uuid.uuid4(),
                    conversation_id=sample_conversation.id,
                    sender=Sender.USER,
                    message_sequence=sequence,
                    content=f"message {sequence}",
                    created_at=datetime.now(UTC),
                )
            )

        messages = repo.get_by_conversation(sample_conversation.id)
        assert [m.message_sequence for m in messages] == [1, 2, 3]
        assert repo.count_by_conversation(sample_conversation.id) == 3

    def test_get_with_model(
        self,
        db_session: Session,
        sample_message: GenAIMessage,
        sample_model: GenAIModel,
    ):
        db_session.expire_all()
        repo = MessageRepository(db_session)
        message = repo.get_with_model(sample_message.id)

        assert message is not None
        assert message.model.id == sample_model.id


class TestCitationRepository:
    """Tests for CitationRepository."""

    def test_get_by_message(self, db_session: Session, sample_message: GenAIMessage):
        repo = CitationRepository(db_session)
        repo.add(
            GenAICitation(
                message_id=sample_message.id,
                source_url="https://example.com/a",
                created_at=datetime.now(UTC),
            )
        )
        hidden = repo.add(
            GenAICitation(
                message_id=sample_message.id,
                source_url="https://example.com/b",
                created_at=datetime.now(UTC),
            )
        )
        repo.soft_delete(hidden, datetime.now(UTC))

        citations = repo.get_by_message(sample_message.id)
        assert [c.source_url for c in citations] == ["https://example.com/a"]
