"""
FastAPI dependencies for the social application.

Services are built once at startup from an explicit settings object and a
database handle, then handed to routes through these getters.
"""

from typing import Annotated, Any, Callable, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.auth import AuthProvider, JWTAuth, PasswordHasher, create_auth_dependency
from common.utils.exceptions import NotFoundException, UnauthorizedException
from social.config import Settings
from social.services import (
    AuthService,
    NotificationService,
    PostService,
    UserService,
    UserStore,
)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

_auth_provider: Optional[AuthProvider] = None
_auth_guard: Optional[Callable] = None
_user_store: Optional[UserStore] = None
_auth_service: Optional[AuthService] = None
_user_service: Optional[UserService] = None
_post_service: Optional[PostService] = None
_notification_service: Optional[NotificationService] = None


# ─────────────────────────────────────────────────────────────────
# Initialization
# ─────────────────────────────────────────────────────────────────

def init_all_services(db: AsyncIOMotorDatabase, settings: Settings) -> None:
    """
    Initialize all services.

    Called once at application startup.

    Raises:
        ValueError: If the token signing secret is missing
    """
    global _auth_provider, _auth_guard, _user_store, _auth_service
    global _user_service, _post_service, _notification_service

    _auth_provider = JWTAuth(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        session_expire_days=settings.SESSION_EXPIRE_DAYS,
        cookie_name=settings.SESSION_COOKIE_NAME,
        secure_cookies=settings.is_production(),
    )
    _auth_guard = create_auth_dependency(
        lambda: _auth_provider,
        cookie_name=settings.SESSION_COOKIE_NAME,
    )

    hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)

    _user_store = UserStore(db=db)
    _notification_service = NotificationService(db=db)
    _auth_service = AuthService(
        users=_user_store,
        hasher=hasher,
        tokens=_auth_provider,
        min_password_length=settings.MIN_PASSWORD_LENGTH,
    )
    _user_service = UserService(
        users=_user_store,
        hasher=hasher,
        notifications=_notification_service,
        min_password_length=settings.MIN_PASSWORD_LENGTH,
        suggested_sample_size=settings.SUGGESTED_USERS_SAMPLE,
        suggested_limit=settings.SUGGESTED_USERS_LIMIT,
    )
    _post_service = PostService(
        db=db,
        users=_user_store,
        notifications=_notification_service,
    )


def _require(service, name: str):
    if service is None:
        raise RuntimeError(f"{name} not initialized. Call init_all_services first.")
    return service


def get_auth_provider() -> AuthProvider:
    """Get session token provider."""
    return _require(_auth_provider, "Auth provider")


def get_user_store() -> UserStore:
    """Get credential store."""
    return _require(_user_store, "User store")


def get_auth_service() -> AuthService:
    """Get auth flow service."""
    return _require(_auth_service, "Auth service")


def get_user_service() -> UserService:
    """Get user service."""
    return _require(_user_service, "User service")


def get_post_service() -> PostService:
    """Get post service."""
    return _require(_post_service, "Post service")


def get_notification_service() -> NotificationService:
    """Get notification service."""
    return _require(_notification_service, "Notification service")


# ─────────────────────────────────────────────────────────────────
# Route guard
# ─────────────────────────────────────────────────────────────────

async def get_current_user_id(request: Request) -> str:
    """User id from a verified session cookie (401 otherwise)."""
    guard = _require(_auth_guard, "Auth guard")
    return await guard(request)


async def require_user(
    user_id: Annotated[str, Depends(get_current_user_id)],
    users: Annotated[UserStore, Depends(get_user_store)],
) -> Dict[str, Any]:
    """
    Dependency that requires an authenticated, existing user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: Annotated[dict, Depends(require_user)]):
            return {"user_id": str(user["_id"])}
    """
    try:
        user_oid = ObjectId(user_id)
    except (InvalidId, TypeError):
        raise UnauthorizedException(
            message="Unauthorized: Invalid token",
            code="INVALID_TOKEN",
        )

    user = await users.find_by_id(user_oid)
    if not user:
        raise NotFoundException(message="User not found", code="USER_NOT_FOUND")
    return user
