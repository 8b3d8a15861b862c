"""
Failure kinds raised by the authentication primitives.

Token failures subclass ValueError so callers that only care about
"token rejected" can catch that, while the route guard tells them apart.
"""


class TokenError(ValueError):
    """Base class for session token failures."""


class MissingTokenError(TokenError):
    """No token was presented."""


class InvalidTokenError(TokenError):
    """Token is malformed, carries a bad signature, or lacks a subject."""


class ExpiredTokenError(TokenError):
    """Token signature is valid but its expiry has passed."""


class HashingFailure(Exception):
    """The password hashing primitive could not run (e.g. malformed hash)."""
