"""
Notification service for in-app notifications.

Stores follow/like events and serves them back to their recipient.
Delivery beyond the in-app list is not handled here.
"""

import logging
from typing import Any, Dict, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.database import utcnow
from social.models import NOTIFICATION_TYPES
from social.services.serializers import serialize

logger = logging.getLogger(__name__)

SENDER_FIELDS = {"username": 1, "profileImg": 1}


class NotificationService:
    """
    Handles in-app notification management.

    Notification types:
    - follow: someone followed the recipient
    - like: someone liked one of the recipient's posts
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize NotificationService.

        Args:
            db: MongoDB database connection
        """
        self._collection = db["notifications"]
        self._users_collection = db["users"]

    async def create_notification(
        self,
        from_user_id: ObjectId,
        to_user_id: ObjectId,
        notification_type: str,
    ) -> Dict[str, Any]:
        """
        Store a notification for a user.

        Args:
            from_user_id: User who triggered the event
            to_user_id: Recipient
            notification_type: One of NOTIFICATION_TYPES

        Returns:
            Created notification document
        """
        if notification_type not in NOTIFICATION_TYPES:
            raise ValueError(f"Unknown notification type: {notification_type}")

        now = utcnow()
        notification_doc = {
            "from": from_user_id,
            "to": to_user_id,
            "type": notification_type,
            "read": False,
            "createdAt": now,
            "updatedAt": now,
        }

        result = await self._collection.insert_one(notification_doc)
        notification_doc["_id"] = result.inserted_id

        logger.debug(f"Created {notification_type} notification for user {to_user_id}")
        return notification_doc

    async def get_notifications(self, user_id: ObjectId) -> List[Dict[str, Any]]:
        """
        Get a user's notifications, newest first, and mark them read.

        The sender is populated with username and profileImg.
        """
        cursor = self._collection.find({"to": user_id}).sort("createdAt", -1)
        notifications = await cursor.to_list(length=None)

        sender_ids = list({n["from"] for n in notifications if n.get("from")})
        senders: Dict[ObjectId, Dict[str, Any]] = {}
        if sender_ids:
            sender_cursor = self._users_collection.find(
                {"_id": {"$in": sender_ids}},
                SENDER_FIELDS,
            )
            senders = {u["_id"]: u for u in await sender_cursor.to_list(length=None)}

        await self._collection.update_many(
            {"to": user_id, "read": False},
            {"$set": {"read": True, "updatedAt": utcnow()}},
        )

        populated = []
        for notification in notifications:
            item = dict(notification)
            item["from"] = senders.get(notification.get("from"))
            populated.append(serialize(item))
        return populated

    async def delete_notifications(self, user_id: ObjectId) -> int:
        """
        Delete all notifications addressed to a user.

        Returns:
            Number of notifications deleted
        """
        result = await self._collection.delete_many({"to": user_id})
        logger.info(f"Deleted {result.deleted_count} notifications for user {user_id}")
        return result.deleted_count
