"""
API Routers.

All routers are imported here for easy access.
"""

from social.routers.auth import router as auth_router
from social.routers.users import router as users_router
from social.routers.posts import router as posts_router
from social.routers.notifications import router as notifications_router

__all__ = [
    "auth_router",
    "users_router",
    "posts_router",
    "notifications_router",
]
