"""
Candidate service.
Handles candidate CRUD operations and the legacy replace-all save.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.models.base import serialize_document
from app.models.candidate_models import CandidateDocument
from app.services.base import NotFoundError, ValidationError, parse_object_id
from app.utils.logger import get_logger

logger = get_logger(__name__)

# Fields the server owns; clients cannot set them on create or overwrite them through an update
SERVER_FIELDS = {"id", "_id", "createdAt", "updatedAt", "created_at", "updated_at"}


class CandidateService:
    """Service for managing candidate documents in a single collection."""

    def __init__(self, *, collection):
        self._collection = collection

    async def list_candidates(self) -> List[Dict[str, Any]]:
        """
        Fetch every candidate with its identifier exposed as ``id``.

        Returns:
            JSON-safe candidate documents
        """
        docs = await self._collection.find({}).to_list(length=None)
        logger.info(f"Found {len(docs)} candidates")
        return [serialize_document(doc, with_id=True) for doc in docs]

    async def list_raw(self) -> List[Dict[str, Any]]:
        """Fetch every candidate exactly as stored (legacy listing)."""
        docs = await self._collection.find({}).to_list(length=None)
        logger.info(f"Found {len(docs)} candidates")
        return [serialize_document(doc) for doc in docs]

    async def replace_all(self, candidates: Any) -> int:
        """
        Replace the whole collection with ``candidates``.

        Not atomic: the collection is emptied before the new documents are
        inserted, so a failed insert leaves it empty.

        Args:
            candidates: List of candidate objects

        Returns:
            Number of candidates inserted

        Raises:
            ValidationError: If candidates is not a list
        """
        if not isinstance(candidates, list):
            raise ValidationError("Expected array of candidates")

        await self._collection.delete_many({})
        logger.info("Cleared existing candidates")

        if candidates:
            await self._collection.insert_many(candidates)
            logger.info(f"Inserted {len(candidates)} candidates")

        return len(candidates)

    async def create_candidate(self, candidate: Optional[Dict[str, Any]]) -> str:
        """
        Create a new candidate.

        Args:
            candidate: Candidate fields

        Returns:
            Created candidate ID

        Raises:
            ValidationError: If no candidate was supplied
        """
        if candidate is None or not isinstance(candidate, dict):
            raise ValidationError("Candidate data is required")

        fields = {key: value for key, value in candidate.items() if key not in SERVER_FIELDS}
        now = datetime.now(timezone.utc)
        document = CandidateDocument.model_validate({**fields, "createdAt": now, "updatedAt": now}).to_mongo()

        result = await self._collection.insert_one(document)
        candidate_id = str(result.inserted_id)

        logger.info(f"Created candidate: {candidate_id}")
        return candidate_id

    async def update_candidate(self, candidate: Optional[Dict[str, Any]]) -> None:
        """
        Merge the supplied fields into an existing candidate.

        Args:
            candidate: Candidate fields including its ``id``

        Raises:
            ValidationError: If the id is missing or malformed
            NotFoundError: If no candidate has that id
        """
        if not candidate or not candidate.get("id"):
            raise ValidationError("Candidate ID is required")

        object_id = parse_object_id(candidate["id"])
        updates = {key: value for key, value in candidate.items() if key not in SERVER_FIELDS}
        updates["updatedAt"] = datetime.now(timezone.utc)

        result = await self._collection.update_one({"_id": object_id}, {"$set": updates})

        if result.matched_count == 0:
            logger.warning(f"Candidate not found for update: {object_id}")
            raise NotFoundError(f"Candidate with id {object_id} not found")

        logger.info(f"Updated candidate: {object_id}")

    async def delete_candidate(self, candidate_id: Optional[str]) -> None:
        """
        Delete a candidate by id.

        Raises:
            ValidationError: If the id is missing or malformed
            NotFoundError: If no candidate has that id
        """
        if not candidate_id:
            raise ValidationError("Candidate ID is required")

        object_id = parse_object_id(candidate_id)
        result = await self._collection.delete_one({"_id": object_id})

        if result.deleted_count == 0:
            logger.warning(f"Candidate not found for delete: {object_id}")
            raise NotFoundError(f"Candidate with id {object_id} not found")

        logger.info(f"Deleted candidate: {object_id}")
