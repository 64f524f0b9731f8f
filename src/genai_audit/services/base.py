"""
Shared behavior for the audit-trail access services.

Every service wraps one Session (the unit of work is owned by the caller),
reads through a soft-delete aware repository, and converts rows with an
EntityMapper. Mutations never raise for missing or deleted rows; they
report what happened through MutationResult.
"""

import enum
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel
from sqlalchemy import Uuid

from genai_audit.db.repositories.base import BaseRepository
from genai_audit.mapping import EntityMapper
from genai_audit.models.db import Base

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Base)
DTOT = TypeVar("DTOT", bound=BaseModel)

NIL_UUID = uuid.UUID(int=0)


def _utc_now() -> datetime:
    """Get current UTC time."""
    return datetime.now(timezone.utc)


class MutationResult(str, enum.Enum):
    """Outcome of an update or soft-delete call."""

    UPDATED = "updated"
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    ALREADY_DELETED = "already_deleted"


class AuditedService(Generic[EntityT, DTOT]):
    """
    Read/create/update/soft-delete over one entity family.

    Subclasses set ``entity_name`` for log messages and ``mutable_fields``
    for the columns ``update`` is allowed to overwrite.
    """

    entity_name: str = "record"
    mutable_fields: Tuple[str, ...] = ()

    def __init__(
        self,
        repository: BaseRepository[EntityT],
        mapper: EntityMapper[EntityT, DTOT],
    ):
        self.repository = repository
        self.mapper = mapper

    def _load(self, id: Any) -> Optional[EntityT]:
        """Load one visible row for ``get``; override to eager-load relations."""
        return self.repository.get(id)

    def _to_dtos(self, entities: List[EntityT]) -> List[DTOT]:
        return [self.mapper.to_dto(entity) for entity in entities]

    def get(self, id: Any) -> Optional[DTOT]:
        """
        Get a record by id.

        Returns:
            The DTO, or None when the id is unknown or soft-deleted
        """
        entity = self._load(id)
        if entity is None:
            return None
        return self.mapper.to_dto(entity)

    def list_all(self) -> List[DTOT]:
        """Full-table scan of non-deleted records."""
        return self._to_dtos(self.repository.get_all())

    def _assign_identity(self, entity: EntityT) -> None:
        id_type = self.repository.model.__table__.c.id.type
        if isinstance(id_type, Uuid):
            if entity.id is None or entity.id == NIL_UUID:
                entity.id = uuid.uuid4()
        elif not entity.id:
            # Zero/None leaves the key to the database's autoincrement
            entity.id = None

    def create(self, dto: DTOT) -> Any:
        """
        Insert a record built from a DTO.

        A zero-valued id is replaced by a generated one and an unset
        ``created_at`` is stamped with the current time. Field contents are
        persisted as given.

        Returns:
            The id of the inserted row
        """
        entity = self.mapper.to_entity(dto)
        self._assign_identity(entity)
        if entity.created_at is None:
            entity.created_at = _utc_now()
        self.repository.add(entity)
        logger.info("Created %s %s", self.entity_name, entity.id)
        return entity.id

    def _load_for_mutation(
        self, id: Any, action: str
    ) -> Tuple[Optional[EntityT], Optional[MutationResult]]:
        entity = self.repository.get_including_deleted(id) if id is not None else None
        if entity is None:
            logger.debug(
                "Skipping %s of %s %s: not found", action, self.entity_name, id
            )
            return None, MutationResult.NOT_FOUND
        if entity.is_deleted:
            logger.debug(
                "Skipping %s of %s %s: already deleted", action, self.entity_name, id
            )
            return None, MutationResult.ALREADY_DELETED
        return entity, None

    def update(self, dto: DTOT) -> MutationResult:
        """
        Overwrite the mutable fields of an existing record from a DTO.

        Missing or soft-deleted records are left untouched and no error is
        raised. There is no version check: the last write wins.

        Args:
            dto: DTO carrying the record id, new field values and modified_by

        Returns:
            UPDATED, NOT_FOUND or ALREADY_DELETED
        """
        entity, skipped = self._load_for_mutation(dto.id, "update")
        if skipped is not None:
            return skipped

        for name in self.mutable_fields:
            setattr(entity, name, getattr(dto, name))
        entity.modified_by = dto.modified_by
        entity.modified_at = _utc_now()
        self.repository.save(entity)
        if self.mapper.expansions:
            # Foreign keys may have changed; reload expansions on the next read
            self.repository.session.expire(entity, list(self.mapper.expansions))
        logger.info("Updated %s %s", self.entity_name, entity.id)
        return MutationResult.UPDATED

    def soft_delete(self, id: Any) -> MutationResult:
        """
        Flag a record as deleted and stamp ``modified_at``.

        Repeating the call on a deleted record is a no-op. ``modified_by``
        is left as it was.

        Returns:
            DELETED, NOT_FOUND or ALREADY_DELETED
        """
        entity, skipped = self._load_for_mutation(id, "delete")
        if skipped is not None:
            return skipped

        self.repository.soft_delete(entity, _utc_now())
        logger.info("Soft-deleted %s %s", self.entity_name, id)
        return MutationResult.DELETED
