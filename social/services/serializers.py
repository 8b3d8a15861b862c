"""
Conversion between stored documents and response bodies.
"""

from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId

from common.utils.exceptions import NotFoundException

PUBLIC_USER_FIELDS = (
    "_id",
    "fullName",
    "username",
    "email",
    "followers",
    "following",
    "profileImg",
    "coverImg",
)

PRIVATE_USER_FIELDS = ("password",)


def serialize(value: Any) -> Any:
    """Recursively render ObjectIds as strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: serialize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(item) for item in value]
    return value


def parse_object_id(value: Any, message: str = "Not found") -> ObjectId:
    """
    Parse a path/body identifier.

    Raises:
        NotFoundException: If the value is not a valid ObjectId, since no
            document can carry it
    """
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        raise NotFoundException(message=message)


def public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    """Fields returned by signup and login."""
    return serialize({field: user.get(field) for field in PUBLIC_USER_FIELDS})


def profile_user(user: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Every stored field except the password hash."""
    if user is None:
        return None
    return serialize({
        key: value for key, value in user.items()
        if key not in PRIVATE_USER_FIELDS
    })
