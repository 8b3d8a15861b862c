"""
Expected request failures.

Raise these from services; the app's APIException handler renders every
one of them as ``{"error": message}`` with the matching status code.
``code`` is a machine-readable tag kept for logs and tests, it is not
part of the response body.

Example:
    from common.utils import NotFoundException

    post = await posts.find_one({"_id": post_id})
    if not post:
        raise NotFoundException("Post not found", code="POST_NOT_FOUND")
"""

from typing import Dict, Optional
from fastapi import HTTPException


class APIException(HTTPException):
    """Base for failures that carry a client-facing message."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.message = message
        self.code = code
        super().__init__(status_code=status_code, detail=message, headers=headers)


class BadRequestException(APIException):
    """400 - invalid input, taken username/email, rejected credentials."""

    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST"):
        super().__init__(400, message, code)


class UnauthorizedException(APIException):
    """401 - no session, bad session, or acting on someone else's post."""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, message, code)


class NotFoundException(APIException):
    def __init__(self, message: str = "Not found", code: str = "NOT_FOUND"):
        super().__init__(404, message, code)


class InternalServerException(APIException):
    """500 - store or hashing failure; the message never carries details."""

    def __init__(self, message: str = "Internal server error", code: str = "INTERNAL_ERROR"):
        super().__init__(500, message, code)
