"""Health endpoint: liveness plus whether the database is configured."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.config.settings import Settings, get_settings

router = APIRouter(tags=["health"])

ALLOWED_METHODS = "GET, POST, OPTIONS"


@router.api_route("/api/test", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], summary="Health check")
async def health_check(settings: Settings = Depends(get_settings)) -> dict:
    """Reports that the API is up; never opens a database connection."""
    return {
        "message": "API is working!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.ENVIRONMENT,
        "mongoConnected": settings.mongo_configured,
    }
