"""Pydantic DTOs for the candidate routes."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import OPEN_MODEL_CONFIG


class CandidateDocument(BaseModel):
    """A stored candidate: timestamps plus any application-defined fields."""

    model_config = OPEN_MODEL_CONFIG

    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    def to_mongo(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class CandidatePayload(BaseModel):
    model_config = OPEN_MODEL_CONFIG

    id: Optional[Any] = None


class CandidateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    candidate: Optional[CandidatePayload] = None


class CandidateListResponse(BaseModel):
    success: bool = True
    candidates: List[Dict[str, Any]]


class CandidateCreatedResponse(BaseModel):
    success: bool = True
    id: str


class SuccessResponse(BaseModel):
    success: bool = True


class LegacySaveResponse(BaseModel):
    message: str = "Candidates saved successfully"
    count: int
