"""
Application services.
"""

from social.services.user_store import UserStore, DuplicateUserError
from social.services.auth_service import AuthService, AuthResult
from social.services.notification_service import NotificationService
from social.services.user_service import UserService
from social.services.post_service import PostService

__all__ = [
    "UserStore",
    "DuplicateUserError",
    "AuthService",
    "AuthResult",
    "NotificationService",
    "UserService",
    "PostService",
]
