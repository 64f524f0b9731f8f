"""
Base repository with soft-delete aware CRUD operations.
"""

from datetime import datetime
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Query, Session

from genai_audit.models.db import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing CRUD operations over one audited table.

    Rows flagged ``is_deleted`` are hidden from every read built on
    ``_visible()``. Only ``get_including_deleted`` bypasses it, for the
    mutation paths that must tell "missing" apart from "already deleted".
    """

    def __init__(self, model: Type[ModelType], session: Session):
        self.model = model
        self.session = session

    def _visible(self) -> Query:
        """Query over rows that have not been soft-deleted."""
        return self.session.query(self.model).filter(
            self.model.is_deleted == False  # noqa: E712
        )

    def get(self, id: Any) -> Optional[ModelType]:
        """
        Get a non-deleted record by primary key.

        Args:
            id: Primary key value

        Returns:
            Model instance or None
        """
        return self._visible().filter(self.model.id == id).first()

    def get_including_deleted(self, id: Any) -> Optional[ModelType]:
        """Find a record by primary key regardless of its soft-delete flag."""
        return self.session.get(self.model, id)

    def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[ModelType]:
        """
        Get all non-deleted records.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            List of model instances
        """
        query = self._visible().order_by(self.model.id).offset(offset)
        if limit:
            query = query.limit(limit)
        return query.all()

    def count(self) -> int:
        """Count non-deleted records."""
        return self._visible().count()

    def add(self, instance: ModelType) -> ModelType:
        """
        Insert a new record.

        The session is flushed so generated keys are available; committing
        is left to the unit of work that owns the session.

        Args:
            instance: Transient model instance

        Returns:
            The persisted instance
        """
        self.session.add(instance)
        self.session.flush()
        return instance

    def save(self, instance: ModelType) -> ModelType:
        """Flush pending changes on an existing record."""
        self.session.flush()
        return instance

    def soft_delete(self, instance: ModelType, deleted_at: datetime) -> ModelType:
        """
        Flag a record as deleted.

        Args:
            instance: Persistent model instance
            deleted_at: Timestamp written to ``modified_at``

        Returns:
            The updated instance
        """
        instance.is_deleted = True
        instance.modified_at = deleted_at
        self.session.flush()
        return instance
