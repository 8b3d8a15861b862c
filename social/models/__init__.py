"""
Document models.

Registered with Beanie at startup so their indexes exist before the first
request; services query the collections through Motor.
"""

from social.models.user import User
from social.models.post import Post, Comment
from social.models.notification import Notification, NOTIFICATION_TYPES

DOCUMENT_MODELS = [User, Post, Notification]

__all__ = [
    "User",
    "Post",
    "Comment",
    "Notification",
    "NOTIFICATION_TYPES",
    "DOCUMENT_MODELS",
]
