"""
Abstract session token provider interface.

Defines the contract that token providers must implement so the route guard
and the auth flow do not depend on a specific token format.

Example:
    from common.auth import AuthProvider, JWTAuth

    def get_auth_provider(settings) -> AuthProvider:
        return JWTAuth(secret=settings.JWT_SECRET)
"""

from abc import ABC, abstractmethod
from typing import Dict, Any

from common.auth.cookies import CookieDirective


class AuthProvider(ABC):
    """
    Abstract session token provider.

    All token methods are async to support both sync and async implementations.
    """

    @abstractmethod
    async def create_token(
        self,
        user_id: str,
        **claims: Any,
    ) -> str:
        """
        Create a session token for a user.

        Args:
            user_id: The user's ID
            **claims: Additional claims to include in the token

        Returns:
            The token string
        """
        pass

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify a session token.

        Args:
            token: The token to verify

        Returns:
            Dictionary containing decoded token claims

        Raises:
            MissingTokenError: If no token was given
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the signature or payload is bad
        """
        pass

    @abstractmethod
    async def get_user_id(self, token: str) -> str:
        """
        Verify a token and return the user identity it binds.

        Raises:
            TokenError: Any of the token failure kinds
        """
        pass

    @abstractmethod
    def session_cookie(self, token: str) -> CookieDirective:
        """Build the cookie directive that hands the token to the client."""
        pass

    @abstractmethod
    def clear_cookie(self) -> CookieDirective:
        """Build the cookie directive that makes the client drop its token."""
        pass
