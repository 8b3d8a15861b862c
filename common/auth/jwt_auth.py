"""
JWT session token provider.

Tokens are stateless: there is no server-side revocation list, logging out
only tells the client to drop its cookie.

Example:
    auth = JWTAuth(secret="your-secret-key", session_expire_days=15)

    token = await auth.create_token(user_id)
    user_id = await auth.get_user_id(token)
    auth.session_cookie(token).apply(response)
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Any, Optional

from jose import jwt, JWTError, ExpiredSignatureError

from common.auth.base import AuthProvider
from common.auth.cookies import CookieDirective
from common.auth.exceptions import (
    MissingTokenError,
    InvalidTokenError,
    ExpiredTokenError,
)

logger = logging.getLogger(__name__)

USER_ID_CLAIM = "userId"


class JWTAuth(AuthProvider):
    """
    JWT session token provider.

    Handles token creation/verification and the session cookie that carries
    the token. The signing secret is fixed at construction time.
    """

    def __init__(
        self,
        secret: Optional[str],
        algorithm: str = "HS256",
        session_expire_days: int = 15,
        cookie_name: str = "jwt",
        secure_cookies: bool = False,
    ):
        """
        Initialize JWT auth provider.

        Args:
            secret: Secret key for JWT signing
            algorithm: JWT algorithm (default: HS256)
            session_expire_days: Token and cookie lifetime
            cookie_name: Name of the session cookie
            secure_cookies: Restrict the cookie to HTTPS

        Raises:
            ValueError: If no secret is configured
        """
        if not secret:
            raise ValueError("JWT secret is required")

        self.secret = secret
        self.algorithm = algorithm
        self.session_expire = timedelta(days=session_expire_days)
        self.cookie_name = cookie_name
        self.secure_cookies = secure_cookies

    @property
    def max_age_seconds(self) -> int:
        return int(self.session_expire.total_seconds())

    async def create_token(
        self,
        user_id: str,
        **claims: Any,
    ) -> str:
        """Create a JWT token for the user."""
        now = datetime.now(timezone.utc)
        payload = {
            USER_ID_CLAIM: str(user_id),
            "iat": now,
            "exp": now + self.session_expire,
            **claims,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    async def verify_token(self, token: Optional[str]) -> Dict[str, Any]:
        """Verify and decode a JWT token."""
        if not token:
            raise MissingTokenError("No token provided")

        try:
            return jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
            )
        except ExpiredSignatureError as e:
            raise ExpiredTokenError("Token has expired") from e
        except JWTError as e:
            logger.debug(f"Rejected session token: {e}")
            raise InvalidTokenError(f"Invalid token: {e}") from e

    async def get_user_id(self, token: Optional[str]) -> str:
        """Verify a token and return its user id."""
        payload = await self.verify_token(token)
        user_id = payload.get(USER_ID_CLAIM)
        if not user_id:
            raise InvalidTokenError("Token missing user ID")
        return user_id

    def session_cookie(self, token: str) -> CookieDirective:
        return CookieDirective(
            name=self.cookie_name,
            value=token,
            max_age=self.max_age_seconds,
            httponly=True,
            samesite="strict",
            secure=self.secure_cookies,
        )

    def clear_cookie(self) -> CookieDirective:
        return CookieDirective(
            name=self.cookie_name,
            value="",
            max_age=0,
            httponly=True,
            samesite="strict",
            secure=self.secure_cookies,
        )
