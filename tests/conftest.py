"""
Pytest configuration and fixtures for genai_audit tests.

This module provides shared fixtures for testing database models,
repositories, mappers and services.
"""

import os

# Point the module-level engine at SQLite before anything imports it
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import uuid  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from decimal import Decimal  # noqa: E402
from typing import Generator  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from genai_audit.models.db import (  # noqa: E402
    Base,
    GenAIConversation,
    GenAIConversationType,
    GenAIMessage,
    GenAIModel,
    RiskLevel,
    Sender,
)


@pytest.fixture(scope="session")
def test_engine():
    """Create a test database engine using SQLite in-memory."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(test_engine) -> Generator[Session, None, None]:
    """
    Create a new database session for a test.

    Each test gets a fresh session with a transaction that is rolled back
    after the test completes, ensuring test isolation.
    """
    connection = test_engine.connect()
    transaction = connection.begin()
    session = sessionmaker(bind=connection, autoflush=False)()

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def sample_model(db_session: Session) -> GenAIModel:
    """Create a sample model for testing."""
    model = GenAIModel(
        name="gpt-4o",
        provider="OpenAI",
        version="2024-08-06",
        license="proprietary",
        is_active=True,
        created_by="seed",
        created_at=datetime.now(UTC),
        is_deleted=False,
    )
    db_session.add(model)
    db_session.flush()
    return model


@pytest.fixture
def sample_conversation_type(db_session: Session) -> GenAIConversationType:
    """Create a sample conversation type for testing."""
    conversation_type = GenAIConversationType(
        name="Claims Assistant",
        default_system_prompt="You help adjusters review insurance claims.",
        version=1,
        is_active=True,
        risk_level=RiskLevel.HIGH,
        use_case_category="insurance",
        created_by="seed",
        created_at=datetime.now(UTC),
        is_deleted=False,
    )
    db_session.add(conversation_type)
    db_session.flush()
    return conversation_type


@pytest.fixture
def sample_conversation(
    db_session: Session, sample_conversation_type: GenAIConversationType
) -> GenAIConversation:
    """Create a sample conversation for testing."""
    conversation = GenAIConversation(
        id=uuid.uuid4(),
        user_id="user-42",
        conversation_type_id=sample_conversation_type.id,
        started_at=datetime.now(UTC) - timedelta(hours=1),
        created_by="user-42",
        created_at=datetime.now(UTC) - timedelta(hours=1),
        is_deleted=False,
    )
    db_session.add(conversation)
    db_session.flush()
    return conversation


@pytest.fixture
def sample_message(
    db_session: Session,
    sample_conversation: GenAIConversation,
    sample_model: GenAIModel,
) -> GenAIMessage:
    """Create a sample assistant message for testing."""
    message = GenAIMessage(
        id=uuid.uuid4(),
        conversation_id=sample_conversation.id,
        sender=Sender.ASSISTANT,
        message_sequence=1,
        content="The claim is covered under section 4.",
        relevance_percentage=Decimal("87.50"),
        model_id=sample_model.id,
        was_decision_made=True,
        requires_human_review=False,
        is_final_output=True,
        created_by="assistant",
        created_at=datetime.now(UTC),
        is_deleted=False,
    )
    db_session.add(message)
    db_session.flush()
    return message
