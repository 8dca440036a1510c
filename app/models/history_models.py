"""Pydantic DTOs for the audit history routes."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HistoryEntry(BaseModel):
    """An append-only audit record of an action taken on a candidate."""

    action: str
    candidateName: str
    details: str = ""
    timestamp: datetime
    date: str
    time: str

    @classmethod
    def build(cls, *, action: str, candidate_name: str, details: Optional[str] = None,
              now: Optional[datetime] = None) -> "HistoryEntry":
        now = now or datetime.now(timezone.utc)
        return cls(
            action=action,
            candidateName=candidate_name,
            details=details or "",
            timestamp=now,
            date=now.date().isoformat(),
            # Locale formatted wall-clock time of the server
            time=now.astimezone().strftime("%X"),
        )


class HistoryCreateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    action: Optional[str] = None
    candidate_name: Optional[str] = Field(None, alias="candidateName")
    details: Optional[str] = None


class HistoryListResponse(BaseModel):
    success: bool = True
    history: List[Dict[str, Any]]


class HistoryCreatedResponse(BaseModel):
    success: bool = True
    message: str = "History entry added successfully"
