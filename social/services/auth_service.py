"""
Auth flow: signup, login and logout.

Each operation returns an AuthResult describing the status code, JSON body
and cookie directives; the router applies it to the HTTP response. A session
cookie is only issued once the user record has been stored.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from fastapi.concurrency import run_in_threadpool

from common.auth import AuthProvider, CookieDirective, PasswordHasher
from common.utils import (
    APIException,
    BadRequestException,
    InternalServerException,
    is_valid_email,
    message_response,
    validate_password,
)
from social.services.serializers import public_user
from social.services.user_store import DuplicateUserError, UserStore

logger = logging.getLogger(__name__)

INVALID_EMAIL = "Invalid email format"
USERNAME_TAKEN = "Username is already taken"
EMAIL_TAKEN = "Email is already taken"
INVALID_CREDENTIALS = "Invalid username or password"


@dataclass
class AuthResult:
    """Outcome of an auth operation, independent of the transport."""

    status_code: int
    body: Dict[str, Any]
    cookies: List[CookieDirective] = field(default_factory=list)


def taken_error(field_name: str) -> BadRequestException:
    """Error for a username/email uniqueness violation."""
    if field_name == "email":
        return BadRequestException(EMAIL_TAKEN, code="EMAIL_TAKEN")
    return BadRequestException(USERNAME_TAKEN, code="USERNAME_TAKEN")


class AuthService:
    """
    Orchestrates the credential store, password hasher and token provider.
    """

    def __init__(
        self,
        users: UserStore,
        hasher: PasswordHasher,
        tokens: AuthProvider,
        min_password_length: int = 6,
    ):
        """
        Initialize AuthService.

        Args:
            users: Credential store
            hasher: Password hasher
            tokens: Session token provider
            min_password_length: Shortest accepted password
        """
        self._users = users
        self._hasher = hasher
        self._tokens = tokens
        self._min_password_length = min_password_length
        # Verified against when the username is unknown
        self._dummy_hash = hasher.hash("unused-login-placeholder")

    async def signup(
        self,
        full_name: str,
        username: str,
        email: str,
        password: str,
    ) -> AuthResult:
        """
        Create an account and start a session for it.

        Raises:
            BadRequestException: Invalid email, weak password, taken username/email
            InternalServerException: Store or hashing failure
        """
        if not is_valid_email(email):
            raise BadRequestException(INVALID_EMAIL, code="INVALID_EMAIL")

        try:
            if await self._users.find_by_username(username):
                raise taken_error("username")

            if await self._users.find_by_email(email):
                raise taken_error("email")

            is_valid, errors = validate_password(password, min_length=self._min_password_length)
            if not is_valid:
                raise BadRequestException(errors[0], code="WEAK_PASSWORD")

            password_hash = await run_in_threadpool(self._hasher.hash, password)
            user = await self._users.create(
                full_name=full_name,
                username=username,
                email=email,
                password_hash=password_hash,
            )
            token = await self._tokens.create_token(str(user["_id"]))
        except DuplicateUserError as e:
            logger.info(f"Signup lost a uniqueness race on {e.field}")
            raise taken_error(e.field)
        except APIException:
            raise
        except Exception as e:
            logger.error(f"Error in signup: {type(e).__name__}: {e}")
            raise InternalServerException()

        logger.info(f"User {user['_id']} signed up")
        return AuthResult(
            status_code=201,
            body=public_user(user),
            cookies=[self._tokens.session_cookie(token)],
        )

    async def login(self, username: str, password: str) -> AuthResult:
        """
        Check credentials and start a session.

        Unknown usernames and wrong passwords get the same response.

        Raises:
            BadRequestException: Invalid credentials
            InternalServerException: Store or hashing failure
        """
        try:
            user = await self._users.find_by_username(username)
            if not user:
                await run_in_threadpool(self._hasher.verify, password, self._dummy_hash)
                raise BadRequestException(INVALID_CREDENTIALS, code="INVALID_CREDENTIALS")

            password_ok = await run_in_threadpool(
                self._hasher.verify, password, user.get("password") or ""
            )
            if not password_ok:
                raise BadRequestException(INVALID_CREDENTIALS, code="INVALID_CREDENTIALS")

            token = await self._tokens.create_token(str(user["_id"]))
        except APIException:
            raise
        except Exception as e:
            logger.error(f"Error in login: {type(e).__name__}: {e}")
            raise InternalServerException()

        logger.info(f"User {user['_id']} logged in")
        return AuthResult(
            status_code=200,
            body=public_user(user),
            cookies=[self._tokens.session_cookie(token)],
        )

    async def logout(self) -> AuthResult:
        """End the client's session by expiring its cookie."""
        try:
            cookie = self._tokens.clear_cookie()
        except Exception as e:
            logger.error(f"Error in logout: {type(e).__name__}: {e}")
            raise InternalServerException()

        return AuthResult(
            status_code=200,
            body=message_response("Logged out successfully"),
            cookies=[cookie],
        )
