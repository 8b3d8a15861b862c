"""Unit tests for NotificationService."""

import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock
from bson import ObjectId

from social.services.notification_service import NotificationService


@pytest.fixture
def notification_service(users_db):
    return NotificationService(db=users_db)


class TestCreateNotification:
    @pytest.mark.asyncio
    async def test_stores_unread_notification(self, notification_service, mock_collection):
        sender, recipient = ObjectId(), ObjectId()
        mock_collection.insert_one.return_value = MagicMock(inserted_id=ObjectId())

        notification = await notification_service.create_notification(sender, recipient, "follow")

        stored = mock_collection.insert_one.call_args[0][0]
        assert stored["from"] == sender
        assert stored["to"] == recipient
        assert stored["type"] == "follow"
        assert stored["read"] is False
        assert "_id" in notification

    @pytest.mark.asyncio
    async def test_rejects_unknown_type(self, notification_service, mock_collection):
        with pytest.raises(ValueError):
            await notification_service.create_notification(ObjectId(), ObjectId(), "mention")

        mock_collection.insert_one.assert_not_called()


class TestGetNotifications:
    @pytest.mark.asyncio
    async def test_populates_sender_and_marks_read(
        self, notification_service, mock_collection, make_user, cursor_of
    ):
        ann = make_user()
        bob = make_user(username="bob", email="bob@x.com", profileImg="bob.png")
        notification = {
            "_id": ObjectId(),
            "from": bob["_id"],
            "to": ann["_id"],
            "type": "like",
            "read": False,
            "createdAt": datetime.now(timezone.utc),
        }
        mock_collection.find = MagicMock(return_value=cursor_of([notification]))

        result = await notification_service.get_notifications(ann["_id"])

        assert result[0]["from"] == {
            "_id": str(bob["_id"]),
            "username": "bob",
            "profileImg": "bob.png",
        }
        assert result[0]["to"] == str(ann["_id"])
        mock_collection.find.assert_called_once_with({"to": ann["_id"]})
        mock_collection.find.return_value.sort.assert_called_once_with("createdAt", -1)

        query, operation = mock_collection.update_many.call_args[0]
        assert query == {"to": ann["_id"], "read": False}
        assert operation["$set"]["read"] is True

    @pytest.mark.asyncio
    async def test_empty_list(self, notification_service, mock_collection, sample_user_id):
        assert await notification_service.get_notifications(sample_user_id) == []


class TestDeleteNotifications:
    @pytest.mark.asyncio
    async def test_deletes_only_recipient_notifications(
        self, notification_service, mock_collection, sample_user_id
    ):
        mock_collection.delete_many.return_value = MagicMock(deleted_count=3)

        deleted = await notification_service.delete_notifications(sample_user_id)

        assert deleted == 3
        mock_collection.delete_many.assert_awaited_once_with({"to": sample_user_id})
