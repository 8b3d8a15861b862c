"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across projects:

- database: Async MongoDB connection with Beanie ODM
- auth: JWT session cookies, bcrypt password hashing, route guard
- utils: Error responses, exceptions, input validation
- config: Base settings class
"""

from common.database import MongoDB, BaseDocument
from common.auth import AuthProvider, JWTAuth, PasswordHasher, create_auth_dependency
from common.utils import (
    error_response,
    APIException,
    BadRequestException,
    UnauthorizedException,
    NotFoundException,
    InternalServerException,
    validate_password,
    is_valid_email,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    "BaseDocument",
    # Auth
    "AuthProvider",
    "JWTAuth",
    "PasswordHasher",
    "create_auth_dependency",
    # Utils
    "error_response",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "NotFoundException",
    "InternalServerException",
    "validate_password",
    "is_valid_email",
    # Config
    "BaseAppSettings",
]
