"""
History service.
Append-only audit log of actions taken on candidates.
"""
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING

from app.models.base import serialize_document
from app.models.history_models import HistoryEntry
from app.services.base import ValidationError
from app.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_HISTORY_LIMIT = 100


class HistoryService:
    """Service for reading and appending history entries."""

    def __init__(self, *, collection, limit: int = DEFAULT_HISTORY_LIMIT):
        self._collection = collection
        self._limit = limit

    async def list_entries(self) -> List[Dict[str, Any]]:
        """
        Return the most recent entries, newest first.

        Entries sharing a timestamp are ordered by insertion (ObjectId), newest first.
        """
        cursor = (
            self._collection.find({})
            .sort([("timestamp", DESCENDING), ("_id", DESCENDING)])
            .limit(self._limit)
        )
        entries = await cursor.to_list(length=self._limit)
        logger.debug(f"Fetched {len(entries)} history entries (limit: {self._limit})")
        return [serialize_document(entry, with_id=True) for entry in entries]

    async def append_entry(self, action: Optional[str], candidate_name: Optional[str],
                           details: Optional[str] = None) -> None:
        """
        Record an action taken on a candidate.

        Raises:
            ValidationError: If action or candidate name is missing
        """
        if not action or not candidate_name:
            raise ValidationError("Action and candidate name are required")

        entry = HistoryEntry.build(action=action, candidate_name=candidate_name, details=details)
        await self._collection.insert_one(entry.model_dump())
        logger.info(f"Added history entry: {action} ({candidate_name})")
