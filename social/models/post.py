"""
Post document with embedded comments.
"""

from typing import List, Optional

import pymongo
from beanie import Indexed, PydanticObjectId
from pydantic import BaseModel, Field

from common.database import BaseDocument


class Comment(BaseModel):
    """Embedded comment."""

    user: PydanticObjectId
    text: str


class Post(BaseDocument):
    """A post by a user; text and/or an image reference."""

    user: Indexed(PydanticObjectId)  # type: ignore
    text: Optional[str] = None
    img: Optional[str] = None
    likes: List[PydanticObjectId] = Field(default_factory=list)
    comments: List[Comment] = Field(default_factory=list)

    class Settings:
        name = "posts"
        indexes = [
            [("createdAt", pymongo.DESCENDING)],
        ]
