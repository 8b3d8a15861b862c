"""
User service for profiles, suggestions and follows.
"""

import logging
from typing import Any, Dict, List

from bson import ObjectId
from fastapi.concurrency import run_in_threadpool

from common.auth import PasswordHasher
from common.utils.exceptions import BadRequestException, NotFoundException
from common.utils.validation import is_valid_email, validate_password
from social.services.auth_service import INVALID_EMAIL, taken_error
from social.services.notification_service import NotificationService
from social.services.serializers import parse_object_id, profile_user
from social.services.user_store import DuplicateUserError, UserStore, WITHOUT_PASSWORD

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"

PROFILE_FIELDS = ("fullName", "email", "username", "bio", "link", "profileImg", "coverImg")


class UserService:
    """
    Manages user profiles and the follow graph.
    """

    def __init__(
        self,
        users: UserStore,
        hasher: PasswordHasher,
        notifications: NotificationService,
        min_password_length: int = 6,
        suggested_sample_size: int = 10,
        suggested_limit: int = 4,
    ):
        self._users = users
        self._hasher = hasher
        self._notifications = notifications
        self._min_password_length = min_password_length
        self._suggested_sample_size = suggested_sample_size
        self._suggested_limit = suggested_limit

    async def get_profile(self, username: str) -> Dict[str, Any]:
        """
        Get a user's profile by username.

        Raises:
            NotFoundException: No such user
        """
        user = await self._users.collection.find_one({"username": username}, WITHOUT_PASSWORD)
        if not user:
            raise NotFoundException(message=USER_NOT_FOUND, code="USER_NOT_FOUND")
        return profile_user(user)

    async def get_suggested_users(self, user_id: ObjectId) -> List[Dict[str, Any]]:
        """
        Suggest users the current user does not follow yet.

        Draws a random sample, drops the ones already followed and
        returns the first few.
        """
        current = await self._users.find_by_id(user_id)
        following = set(current.get("following", [])) if current else set()

        cursor = self._users.collection.aggregate([
            {"$match": {"_id": {"$ne": user_id}}},
            {"$sample": {"size": self._suggested_sample_size}},
            {"$project": WITHOUT_PASSWORD},
        ])
        sampled = await cursor.to_list(length=None)

        suggested = [user for user in sampled if user["_id"] not in following]
        return [profile_user(user) for user in suggested[: self._suggested_limit]]

    async def follow_unfollow(self, user_id: ObjectId, target_id: str) -> Dict[str, str]:
        """
        Toggle whether the current user follows the target.

        Raises:
            BadRequestException: Target is the current user
            NotFoundException: Either user is missing
        """
        target_oid = parse_object_id(target_id, USER_NOT_FOUND)
        if target_oid == user_id:
            raise BadRequestException("You can't follow/unfollow yourself", code="SELF_FOLLOW")

        target = await self._users.find_by_id(target_oid)
        current = await self._users.find_by_id(user_id)
        if not target or not current:
            raise NotFoundException(message=USER_NOT_FOUND, code="USER_NOT_FOUND")

        if target_oid in current.get("following", []):
            await self._users.apply(target_oid, {"$pull": {"followers": user_id}})
            await self._users.apply(user_id, {"$pull": {"following": target_oid}})
            logger.info(f"User {user_id} unfollowed {target_oid}")
            return {"message": "User unfollowed successfully"}

        await self._users.apply(target_oid, {"$addToSet": {"followers": user_id}})
        await self._users.apply(user_id, {"$addToSet": {"following": target_oid}})
        await self._notifications.create_notification(
            from_user_id=user_id,
            to_user_id=target_oid,
            notification_type="follow",
        )
        logger.info(f"User {user_id} followed {target_oid}")
        return {"message": "User followed successfully"}

    async def update_user(self, user_id: ObjectId, changes: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update profile fields and, optionally, the password.

        Args:
            user_id: Current user
            changes: Fields from the request; None values are ignored

        Returns:
            Updated profile

        Raises:
            BadRequestException: Invalid email, taken username/email,
                incomplete or wrong password change
            NotFoundException: User is missing
        """
        user = await self._users.find_by_id(user_id, include_password=True)
        if not user:
            raise NotFoundException(message=USER_NOT_FOUND, code="USER_NOT_FOUND")

        updates: Dict[str, Any] = {}

        current_password = changes.get("currentPassword")
        new_password = changes.get("newPassword")
        if bool(current_password) != bool(new_password):
            raise BadRequestException(
                "Please provide both current password and new password",
                code="PASSWORD_CHANGE_INCOMPLETE",
            )

        if current_password and new_password:
            password_ok = await run_in_threadpool(
                self._hasher.verify, current_password, user.get("password") or ""
            )
            if not password_ok:
                raise BadRequestException("Current password is incorrect", code="WRONG_PASSWORD")

            is_valid, errors = validate_password(new_password, min_length=self._min_password_length)
            if not is_valid:
                raise BadRequestException(errors[0], code="WEAK_PASSWORD")

            updates["password"] = await run_in_threadpool(self._hasher.hash, new_password)

        email = changes.get("email")
        if email is not None and email != user.get("email"):
            if not is_valid_email(email):
                raise BadRequestException(INVALID_EMAIL, code="INVALID_EMAIL")
            if await self._users.find_by_email(email):
                raise taken_error("email")

        username = changes.get("username")
        if username is not None and username != user.get("username"):
            if await self._users.find_by_username(username):
                raise taken_error("username")

        for field_name in PROFILE_FIELDS:
            value = changes.get(field_name)
            if value is not None:
                updates[field_name] = value

        if not updates:
            return profile_user(user)

        try:
            updated = await self._users.update(user_id, updates)
        except DuplicateUserError as e:
            raise taken_error(e.field)

        if not updated:
            raise NotFoundException(message=USER_NOT_FOUND, code="USER_NOT_FOUND")

        logger.info(f"Profile updated for user {user_id}: {sorted(k for k in updates if k != 'password')}")
        return profile_user(updated)
