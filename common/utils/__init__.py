"""
Utilities module - Common helpers for API responses, exceptions, and validation.
"""

from common.utils.responses import error_response, message_response
from common.utils.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    NotFoundException,
    InternalServerException,
)
from common.utils.validation import validate_password, is_valid_email

__all__ = [
    "error_response",
    "message_response",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "NotFoundException",
    "InternalServerException",
    "validate_password",
    "is_valid_email",
]
