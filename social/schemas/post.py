"""
Pydantic models for post requests.
"""

from typing import Optional
from pydantic import BaseModel


class CreatePostRequest(BaseModel):
    """Post body; at least one of text or img is required."""
    text: Optional[str] = None
    img: Optional[str] = None


class CommentRequest(BaseModel):
    """Comment body."""
    text: Optional[str] = None
