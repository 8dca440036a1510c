"""Legacy candidate endpoints: list everything or replace the whole collection."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from app.config.settings import Settings, get_settings
from app.db.client import get_collection, get_mongo_client
from app.models.candidate_models import LegacySaveResponse
from app.routes.responses import LEGACY_PREFIX, legacy_failure
from app.services.base import ValidationError
from app.services.candidate_service import CandidateService
from app.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix=f"{LEGACY_PREFIX}/candidates", tags=["legacy"])

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"


async def get_legacy_candidate_service(settings: Settings) -> CandidateService:
    client = await get_mongo_client(settings)
    collection = get_collection(client, settings.LEGACY_DATABASE, settings.CANDIDATES_COLLECTION)
    return CandidateService(collection=collection)


@router.get("")
async def list_candidates(settings: Settings = Depends(get_settings)):
    """Return the raw array of candidate documents."""
    logger.info("GET request - fetching candidates")
    try:
        service = await get_legacy_candidate_service(settings)
        return await service.list_raw()
    except Exception as exc:
        logger.error(f"API Error: {exc}", exc_info=True)
        return legacy_failure(500, "Database operation failed", details=str(exc))


@router.post("", response_model=LegacySaveResponse)
async def save_candidates(payload: Any = Body(None), settings: Settings = Depends(get_settings)):
    """
    Replace every stored candidate with the posted array.

    The delete and insert are separate operations; a failure between them
    leaves the collection empty.
    """
    logger.info("POST request - saving candidates")
    try:
        service = await get_legacy_candidate_service(settings)
        count = await service.replace_all(payload)
        return {"message": "Candidates saved successfully", "count": count}
    except ValidationError as exc:
        logger.warning(f"Invalid data format: {exc}")
        return legacy_failure(400, str(exc))
    except Exception as exc:
        logger.error(f"API Error: {exc}", exc_info=True)
        return legacy_failure(500, "Database operation failed", details=str(exc))
