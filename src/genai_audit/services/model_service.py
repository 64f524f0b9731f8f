"""
Access service for the model registry.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from genai_audit.db.repositories.model import ModelRepository
from genai_audit.mapping import model_mapper
from genai_audit.models.db import GenAIModel
from genai_audit.schemas import ModelDTO
from genai_audit.services.base import AuditedService


class ModelService(AuditedService[GenAIModel, ModelDTO]):
    """Registered LLMs."""

    entity_name = "model"
    mutable_fields = ("name", "provider", "version", "license", "is_active")

    def __init__(self, session: Session):
        super().__init__(ModelRepository(session), model_mapper)

    def list_models(self) -> List[ModelDTO]:
        return self.list_all()

    def list_active_models(self) -> List[ModelDTO]:
        return self._to_dtos(self.repository.get_active_models())

    def create_model(self, dto: ModelDTO) -> Optional[int]:
        return self.create(dto)
