"""
Notification document.
"""

from beanie import Indexed, PydanticObjectId
from pydantic import Field

from common.database import BaseDocument

NOTIFICATION_TYPES = ("follow", "like")


class Notification(BaseDocument):
    """A follow or like event addressed to a user."""

    from_user: PydanticObjectId = Field(..., alias="from")
    to: Indexed(PydanticObjectId)  # type: ignore
    type: str = Field(..., pattern="^(follow|like)$")
    read: bool = False

    class Settings:
        name = "notifications"
