"""
Pydantic models for user profile updates.
"""

from typing import Optional
from pydantic import AliasChoices, BaseModel, Field


class UpdateUserRequest(BaseModel):
    """Partial profile update. Image fields are references to stored media."""
    fullName: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("fullName", "fullname"),
    )
    email: Optional[str] = None
    username: Optional[str] = Field(None, min_length=1)
    currentPassword: Optional[str] = None
    newPassword: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=160)
    link: Optional[str] = None
    profileImg: Optional[str] = None
    coverImg: Optional[str] = None
