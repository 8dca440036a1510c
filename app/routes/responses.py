"""JSON error bodies shared by the route modules and the app-level exception handlers."""

from typing import Optional

from fastapi.responses import JSONResponse

LEGACY_PREFIX = "/api/legacy"


def failure(status_code: int, error: str, *, details: Optional[str] = None) -> JSONResponse:
    """``{success: false, error, details?}`` body used by the current routes."""
    content = {"success": False, "error": error}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def legacy_failure(status_code: int, error: str, *, details: Optional[str] = None) -> JSONResponse:
    """``{error, details?}`` body used by the legacy candidates route."""
    content = {"error": error}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def failure_for_path(path: str, status_code: int, error: str, *, details: Optional[str] = None) -> JSONResponse:
    if path.startswith(LEGACY_PREFIX):
        return legacy_failure(status_code, error, details=details)
    return failure(status_code, error, details=details)
