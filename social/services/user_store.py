"""
Credential store over the users collection.

Uniqueness of usernames and emails is enforced by unique indexes; a
duplicate-key error from insert or update is reported as DuplicateUserError
naming the offending field.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from common.database import utcnow

logger = logging.getLogger(__name__)

WITHOUT_PASSWORD = {"password": 0}


class DuplicateUserError(Exception):
    """A unique field (username or email) is already in use."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Duplicate {field}")


def _duplicate_field(error: DuplicateKeyError) -> str:
    details = error.details or {}
    key_pattern = details.get("keyPattern") or details.get("keyValue") or {}
    if key_pattern:
        return next(iter(key_pattern))
    return "email" if "email" in str(error) else "username"


class UserStore:
    """
    Finds, creates and updates user records.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize UserStore.

        Args:
            db: MongoDB database connection
        """
        self._collection = db["users"]

    @property
    def collection(self):
        return self._collection

    async def find_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        """Find a user by username, including the password hash."""
        return await self._collection.find_one({"username": username})

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Find a user by email, including the password hash."""
        return await self._collection.find_one({"email": email})

    async def find_by_id(
        self,
        user_id: ObjectId,
        include_password: bool = False,
    ) -> Optional[Dict[str, Any]]:
        """Find a user by id; the password hash is left out unless asked for."""
        projection = None if include_password else WITHOUT_PASSWORD
        return await self._collection.find_one({"_id": user_id}, projection)

    async def find_many(self, user_ids: List[ObjectId]) -> List[Dict[str, Any]]:
        """Fetch several users (without password hashes)."""
        if not user_ids:
            return []
        cursor = self._collection.find({"_id": {"$in": list(user_ids)}}, WITHOUT_PASSWORD)
        return await cursor.to_list(length=None)

    async def create(
        self,
        full_name: str,
        username: str,
        email: str,
        password_hash: str,
    ) -> Dict[str, Any]:
        """
        Insert a new user with empty follow lists and profile fields.

        Raises:
            DuplicateUserError: If the username or email is already taken
        """
        now = utcnow()
        user_doc = {
            "fullName": full_name,
            "username": username,
            "email": email,
            "password": password_hash,
            "followers": [],
            "following": [],
            "likedPosts": [],
            "profileImg": "",
            "coverImg": "",
            "bio": "",
            "link": "",
            "createdAt": now,
            "updatedAt": now,
        }

        try:
            result = await self._collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            raise DuplicateUserError(_duplicate_field(e)) from e

        user_doc["_id"] = result.inserted_id
        logger.info(f"Created user {user_doc['_id']} ({username})")
        return user_doc

    async def update(
        self,
        user_id: ObjectId,
        updates: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Set fields on a user and return the updated record (without password).

        Raises:
            DuplicateUserError: If the new username or email is already taken
        """
        updates = {**updates, "updatedAt": utcnow()}
        try:
            return await self._collection.find_one_and_update(
                {"_id": user_id},
                {"$set": updates},
                projection=WITHOUT_PASSWORD,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateUserError(_duplicate_field(e)) from e

    async def apply(self, user_id: ObjectId, operation: Dict[str, Any]) -> None:
        """Run a raw update operation ($push/$pull) against one user."""
        await self._collection.update_one({"_id": user_id}, operation)
