from typing import Any, Dict

from bson import ObjectId
from fastapi.encoders import jsonable_encoder
from pydantic import ConfigDict

# Documents are schema-less: keep whatever fields the client sends
OPEN_MODEL_CONFIG = ConfigDict(extra="allow")


def serialize_document(doc: Dict[str, Any], *, with_id: bool = False) -> Dict[str, Any]:
    """Convert a MongoDB document into JSON-safe data (ObjectId -> str, datetime -> ISO)."""
    data = jsonable_encoder(doc, custom_encoder={ObjectId: str})
    if with_id and "_id" in data:
        data["id"] = data["_id"]
    return data
