"""
Post service: creating, commenting, liking and listing posts.

Listings are newest first and carry their author and comment authors
populated with profile data (never the password hash). Image values are
stored as given; uploading and deleting media is handled elsewhere.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.database import utcnow
from common.utils.exceptions import (
    BadRequestException,
    NotFoundException,
    UnauthorizedException,
)
from social.services.notification_service import NotificationService
from social.services.serializers import parse_object_id, profile_user, serialize
from social.services.user_store import UserStore

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "Post not found"
USER_NOT_FOUND = "User not found"


class PostService:
    """
    Handles posts and their embedded comments and likes.
    """

    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        users: UserStore,
        notifications: NotificationService,
    ):
        """
        Initialize PostService.

        Args:
            db: MongoDB database connection
            users: Credential store, used for populating authors
            notifications: Receives like events
        """
        self._collection = db["posts"]
        self._users = users
        self._notifications = notifications

    # ─────────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────────

    async def create_post(
        self,
        user_id: ObjectId,
        text: Optional[str] = None,
        img: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a post.

        Raises:
            NotFoundException: Author is missing
            BadRequestException: Neither text nor img given
        """
        user = await self._users.find_by_id(user_id)
        if not user:
            raise NotFoundException(message=USER_NOT_FOUND, code="USER_NOT_FOUND")

        if not text and not img:
            raise BadRequestException("Post must have text or image", code="EMPTY_POST")

        now = utcnow()
        post_doc = {
            "user": user_id,
            "text": text,
            "img": img,
            "likes": [],
            "comments": [],
            "createdAt": now,
            "updatedAt": now,
        }
        result = await self._collection.insert_one(post_doc)
        post_doc["_id"] = result.inserted_id

        logger.info(f"User {user_id} created post {post_doc['_id']}")
        return serialize(post_doc)

    async def delete_post(self, user_id: ObjectId, post_id: str) -> Dict[str, str]:
        """
        Delete one of the current user's posts.

        Raises:
            NotFoundException: No such post
            UnauthorizedException: Post belongs to someone else
        """
        post_oid = parse_object_id(post_id, POST_NOT_FOUND)
        post = await self._collection.find_one({"_id": post_oid})
        if not post:
            raise NotFoundException(message=POST_NOT_FOUND, code="POST_NOT_FOUND")

        if post.get("user") != user_id:
            raise UnauthorizedException(
                message="You are not authorized to delete this post",
                code="NOT_POST_OWNER",
            )

        await self._collection.delete_one({"_id": post_oid})
        logger.info(f"User {user_id} deleted post {post_oid}")
        return {"message": "Post deleted successfully"}

    async def comment_on_post(
        self,
        user_id: ObjectId,
        post_id: str,
        text: Optional[str],
    ) -> Dict[str, Any]:
        """
        Append a comment and return the updated post.

        Raises:
            BadRequestException: Empty text
            NotFoundException: No such post
        """
        if not text:
            raise BadRequestException("Text field is required", code="TEXT_REQUIRED")

        post_oid = parse_object_id(post_id, POST_NOT_FOUND)
        post = await self._collection.find_one({"_id": post_oid})
        if not post:
            raise NotFoundException(message=POST_NOT_FOUND, code="POST_NOT_FOUND")

        comment = {"user": user_id, "text": text}
        await self._collection.update_one(
            {"_id": post_oid},
            {"$push": {"comments": comment}, "$set": {"updatedAt": utcnow()}},
        )

        post.setdefault("comments", []).append(comment)
        return serialize(post)

    async def like_unlike_post(self, user_id: ObjectId, post_id: str) -> Dict[str, str]:
        """
        Toggle the current user's like on a post.

        Liking also records the post on the user's likedPosts and notifies
        the author; unliking removes both entries.

        Raises:
            NotFoundException: No such post
        """
        post_oid = parse_object_id(post_id, POST_NOT_FOUND)
        post = await self._collection.find_one({"_id": post_oid})
        if not post:
            raise NotFoundException(message=POST_NOT_FOUND, code="POST_NOT_FOUND")

        if user_id in post.get("likes", []):
            await self._collection.update_one({"_id": post_oid}, {"$pull": {"likes": user_id}})
            await self._users.apply(user_id, {"$pull": {"likedPosts": post_oid}})
            return {"message": "Post unliked successfully"}

        await self._collection.update_one({"_id": post_oid}, {"$addToSet": {"likes": user_id}})
        await self._users.apply(user_id, {"$addToSet": {"likedPosts": post_oid}})
        await self._notifications.create_notification(
            from_user_id=user_id,
            to_user_id=post["user"],
            notification_type="like",
        )
        return {"message": "Post liked successfully"}

    # ─────────────────────────────────────────────────────────────────
    # Listings
    # ─────────────────────────────────────────────────────────────────

    async def get_all_posts(self) -> List[Dict[str, Any]]:
        """All posts, newest first."""
        return await self._find_posts({})

    async def get_liked_posts(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Posts a user has liked.

        Raises:
            NotFoundException: No such user
        """
        user_oid = parse_object_id(user_id, USER_NOT_FOUND)
        user = await self._users.find_by_id(user_oid)
        if not user:
            raise NotFoundException(message=USER_NOT_FOUND, code="USER_NOT_FOUND")

        liked = user.get("likedPosts", [])
        if not liked:
            return []
        return await self._find_posts({"_id": {"$in": liked}})

    async def get_following_posts(self, user_id: ObjectId) -> List[Dict[str, Any]]:
        """
        Posts by the users the current user follows.

        Raises:
            NotFoundException: Current user is missing
        """
        user = await self._users.find_by_id(user_id)
        if not user:
            raise NotFoundException(message=USER_NOT_FOUND, code="USER_NOT_FOUND")

        following = user.get("following", [])
        logger.debug(f"User {user_id} is following {len(following)} accounts")
        if not following:
            return []
        return await self._find_posts({"user": {"$in": following}})

    async def get_user_posts(self, username: str) -> List[Dict[str, Any]]:
        """
        Posts by one user.

        Raises:
            NotFoundException: No such user
        """
        user = await self._users.find_by_username(username)
        if not user:
            raise NotFoundException(message=USER_NOT_FOUND, code="USER_NOT_FOUND")
        return await self._find_posts({"user": user["_id"]})

    async def _find_posts(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        cursor = self._collection.find(query).sort("createdAt", -1)
        posts = await cursor.to_list(length=None)
        return await self._populate(posts)

    async def _populate(self, posts: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Replace author ids on posts and comments with profile data."""
        author_ids = set()
        for post in posts:
            if post.get("user"):
                author_ids.add(post["user"])
            for comment in post.get("comments", []):
                if comment.get("user"):
                    author_ids.add(comment["user"])

        authors = {
            user["_id"]: profile_user(user)
            for user in await self._users.find_many(list(author_ids))
        }

        populated = []
        for post in posts:
            item = dict(post)
            item["user"] = authors.get(post.get("user"))
            item["comments"] = [
                {**comment, "user": authors.get(comment.get("user"))}
                for comment in post.get("comments", [])
            ]
            populated.append(serialize(item))
        return populated
