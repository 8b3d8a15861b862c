"""
FastAPI authentication dependencies.

Provides a factory that builds a dependency reading the session cookie,
verifying it with any AuthProvider and returning the user ID.

Example:
    from common.auth import JWTAuth, create_auth_dependency

    auth = JWTAuth(secret="your-secret")
    get_current_user_id = create_auth_dependency(lambda: auth)

    @app.get("/profile")
    async def get_profile(user_id: str = Depends(get_current_user_id)):
        return {"user_id": user_id}
"""

from typing import Callable

from fastapi import Request

from common.auth.base import AuthProvider
from common.auth.exceptions import (
    MissingTokenError,
    ExpiredTokenError,
    TokenError,
)
from common.utils.exceptions import UnauthorizedException


def create_auth_dependency(
    get_auth_provider: Callable[[], AuthProvider],
    cookie_name: str = "jwt",
):
    """
    Factory to create FastAPI auth dependencies.

    Args:
        get_auth_provider: Callable that returns the AuthProvider instance
        cookie_name: Cookie that carries the session token

    Returns:
        A FastAPI dependency function that extracts and verifies the user ID
    """

    async def get_current_user_id(request: Request) -> str:
        """
        Extract and verify user ID from the session cookie.

        Raises:
            UnauthorizedException: If token is missing, invalid, or expired
        """
        token = request.cookies.get(cookie_name)
        auth = get_auth_provider()

        try:
            return await auth.get_user_id(token)
        except MissingTokenError:
            raise UnauthorizedException(
                message="Unauthorized: No token provided",
                code="MISSING_TOKEN",
            )
        except ExpiredTokenError:
            raise UnauthorizedException(
                message="Unauthorized: Token expired",
                code="EXPIRED_TOKEN",
            )
        except TokenError:
            raise UnauthorizedException(
                message="Unauthorized: Invalid token",
                code="INVALID_TOKEN",
            )

    return get_current_user_id
