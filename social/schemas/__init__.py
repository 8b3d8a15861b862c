"""
Request schemas.
"""

from social.schemas.auth import SignupRequest, LoginRequest
from social.schemas.user import UpdateUserRequest
from social.schemas.post import CreatePostRequest, CommentRequest

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "UpdateUserRequest",
    "CreatePostRequest",
    "CommentRequest",
]
