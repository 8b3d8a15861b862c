"""
User document.

Usernames and emails are unique indexes, so the store itself rejects
duplicates even when two signups race past the existence checks.
"""

from typing import List

from beanie import Indexed, PydanticObjectId
from pydantic import Field

from common.database import BaseDocument


class User(BaseDocument):
    """Account record with profile fields and follow lists."""

    username: Indexed(str, unique=True)  # type: ignore
    email: Indexed(str, unique=True)  # type: ignore
    full_name: str = Field(..., alias="fullName")

    # bcrypt hash, never returned to clients
    password: str

    followers: List[PydanticObjectId] = Field(default_factory=list)
    following: List[PydanticObjectId] = Field(default_factory=list)
    liked_posts: List[PydanticObjectId] = Field(default_factory=list, alias="likedPosts")

    profile_img: str = Field("", alias="profileImg")
    cover_img: str = Field("", alias="coverImg")
    bio: str = ""
    link: str = ""

    class Settings:
        name = "users"
