"""Audit history endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.config.settings import Settings, get_settings
from app.db.client import get_collection, get_mongo_client
from app.models.history_models import HistoryCreateRequest, HistoryCreatedResponse, HistoryListResponse
from app.routes.responses import failure
from app.services.base import ValidationError
from app.services.history_service import HistoryService
from app.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/history", tags=["history"])

ALLOWED_METHODS = "GET, POST, OPTIONS"


async def get_history_service(settings: Settings) -> HistoryService:
    client = await get_mongo_client(settings)
    collection = get_collection(client, settings.CANDIDATE_DATABASE, settings.HISTORY_COLLECTION)
    return HistoryService(collection=collection, limit=settings.HISTORY_LIMIT)


@router.get("", response_model=HistoryListResponse)
async def list_history(settings: Settings = Depends(get_settings)):
    """Return the 100 most recent history entries, newest first."""
    try:
        service = await get_history_service(settings)
        history = await service.list_entries()
        return {"success": True, "history": history}
    except Exception as exc:
        logger.error(f"GET History Error: {exc}", exc_info=True)
        return failure(500, "Failed to fetch history", details=str(exc))


@router.post("", response_model=HistoryCreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_history_entry(body: Optional[HistoryCreateRequest] = None, settings: Settings = Depends(get_settings)):
    body = body or HistoryCreateRequest()
    try:
        service = await get_history_service(settings)
        await service.append_entry(body.action, body.candidate_name, body.details)
        return {"success": True, "message": "History entry added successfully"}
    except ValidationError as exc:
        logger.warning(f"Invalid history entry: {exc}")
        return failure(400, str(exc))
    except Exception as exc:
        logger.error(f"POST History Error: {exc}", exc_info=True)
        return failure(500, "Failed to add history entry", details=str(exc))
