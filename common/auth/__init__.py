"""
Authentication module - session tokens, cookies, password hashing.
"""

from common.auth.base import AuthProvider
from common.auth.cookies import CookieDirective
from common.auth.jwt_auth import JWTAuth
from common.auth.passwords import PasswordHasher
from common.auth.dependencies import create_auth_dependency
from common.auth.exceptions import (
    TokenError,
    MissingTokenError,
    InvalidTokenError,
    ExpiredTokenError,
    HashingFailure,
)

__all__ = [
    "AuthProvider",
    "CookieDirective",
    "JWTAuth",
    "PasswordHasher",
    "create_auth_dependency",
    "TokenError",
    "MissingTokenError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "HashingFailure",
]
