"""
Access service for message citations.
"""

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from genai_audit.db.repositories.citation import CitationRepository
from genai_audit.mapping import citation_mapper
from genai_audit.models.db import GenAICitation
from genai_audit.schemas import CitationDTO
from genai_audit.services.base import AuditedService


class CitationService(AuditedService[GenAICitation, CitationDTO]):
    """Sources cited by messages."""

    entity_name = "citation"
    mutable_fields = ("source_url", "description")

    def __init__(self, session: Session):
        super().__init__(CitationRepository(session), citation_mapper)

    def get_citations_by_message(self, message_id: uuid.UUID) -> List[CitationDTO]:
        return self._to_dtos(self.repository.get_by_message(message_id))

    def add_citation(self, dto: CitationDTO) -> Optional[int]:
        return self.create(dto)
