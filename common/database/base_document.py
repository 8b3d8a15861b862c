"""
Shared base for the stored models.

Stored documents use camelCase timestamp keys (createdAt, updatedAt);
services that write through raw Motor collections set them with utcnow().
"""

from datetime import datetime, timezone

from beanie import Document
from pydantic import ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseDocument(Document):
    """Document with createdAt/updatedAt, readable by alias or field name."""

    model_config = ConfigDict(populate_by_name=True)

    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")
    updated_at: datetime = Field(default_factory=utcnow, alias="updatedAt")
