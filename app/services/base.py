"""Shared helpers for service modules (exceptions, identifier parsing)"""

from typing import Any

from bson import ObjectId
from bson.errors import InvalidId


class ServiceError(Exception):
    """Base exception for service layer errors."""


class ConfigurationError(ServiceError):
    """Raised when required configuration (e.g. MONGODB_URI) is missing."""


class DatabaseConnectionError(ServiceError, ConnectionError):
    """Raised when MongoDB cannot be reached."""


class ValidationError(ServiceError):
    """Raised when request input is missing or malformed."""


class NotFoundError(ServiceError):
    """Raised when a requested resource is not found."""


def parse_object_id(value: Any, *, field: str = "id") -> ObjectId:
    """Turn a client supplied identifier into an ObjectId, or raise ValidationError."""
    if value is None or value == "":
        raise ValidationError(f"Candidate {field} is required")
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError) as exc:
        raise ValidationError(f"Invalid candidate {field}: {value}") from exc
