"""Candidate CRUD endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.config.settings import Settings, get_settings
from app.db.client import get_collection, get_mongo_client
from app.models.candidate_models import (
    CandidateCreatedResponse,
    CandidateListResponse,
    CandidateRequest,
    SuccessResponse,
)
from app.routes.responses import failure
from app.services.base import NotFoundError, ValidationError
from app.services.candidate_service import CandidateService
from app.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/candidates", tags=["candidates"])

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"


async def get_candidate_service(settings: Settings) -> CandidateService:
    """Wire a CandidateService onto the cached client, connecting on first use."""
    client = await get_mongo_client(settings)
    collection = get_collection(client, settings.CANDIDATE_DATABASE, settings.CANDIDATES_COLLECTION)
    return CandidateService(collection=collection)


@router.get("", response_model=CandidateListResponse)
async def list_candidates(settings: Settings = Depends(get_settings)):
    """Return every candidate, each with its identifier as ``id``."""
    logger.info("GET candidates")
    try:
        service = await get_candidate_service(settings)
        candidates = await service.list_candidates()
        return {"success": True, "candidates": candidates}
    except Exception as exc:
        logger.error(f"GET candidates error: {exc}", exc_info=True)
        return failure(500, "Failed to fetch candidates", details=str(exc))


@router.post("", response_model=CandidateCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_candidate(body: Optional[CandidateRequest] = None, settings: Settings = Depends(get_settings)):
    """
    Create a candidate.

    The server stamps ``createdAt`` and ``updatedAt`` with the same instant
    and assigns the identifier.
    """
    candidate = body.candidate.model_dump() if body and body.candidate is not None else None
    try:
        service = await get_candidate_service(settings)
        candidate_id = await service.create_candidate(candidate)
        return {"success": True, "id": candidate_id}
    except ValidationError as exc:
        logger.warning(f"Invalid create request: {exc}")
        return failure(400, str(exc))
    except Exception as exc:
        logger.error(f"POST candidates error: {exc}", exc_info=True)
        return failure(500, "Failed to create candidate", details=str(exc))


@router.put("", response_model=SuccessResponse)
async def update_candidate(body: Optional[CandidateRequest] = None, settings: Settings = Depends(get_settings)):
    """Merge the supplied fields into the candidate identified by ``candidate.id``."""
    candidate = body.candidate.model_dump() if body and body.candidate is not None else None
    try:
        service = await get_candidate_service(settings)
        await service.update_candidate(candidate)
        return {"success": True}
    except ValidationError as exc:
        logger.warning(f"Invalid update request: {exc}")
        return failure(400, str(exc))
    except NotFoundError as exc:
        logger.warning(f"Candidate not found: {exc}")
        return failure(404, str(exc))
    except Exception as exc:
        logger.error(f"PUT candidates error: {exc}", exc_info=True)
        return failure(500, "Failed to update candidate", details=str(exc))


@router.delete("", response_model=SuccessResponse)
async def delete_candidate(
    candidate_id: Optional[str] = Query(None, alias="id", description="Candidate identifier"),
    settings: Settings = Depends(get_settings),
):
    try:
        service = await get_candidate_service(settings)
        await service.delete_candidate(candidate_id)
        return {"success": True}
    except ValidationError as exc:
        logger.warning(f"Invalid delete request: {exc}")
        return failure(400, str(exc))
    except NotFoundError as exc:
        logger.warning(f"Candidate not found: {exc}")
        return failure(404, str(exc))
    except Exception as exc:
        logger.error(f"DELETE candidates error: {exc}", exc_info=True)
        return failure(500, "Failed to delete candidate", details=str(exc))
