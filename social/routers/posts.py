"""
FastAPI router for post endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from social.dependencies import get_post_service, require_user
from social.schemas.post import CommentRequest, CreatePostRequest
from social.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/all")
async def get_all_posts(
    user: Annotated[dict, Depends(require_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """All posts, newest first."""
    return await post_service.get_all_posts()


@router.get("/following")
async def get_following_posts(
    user: Annotated[dict, Depends(require_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Posts from followed users."""
    return await post_service.get_following_posts(user["_id"])


@router.get("/likes/{user_id}")
async def get_liked_posts(
    user_id: str,
    user: Annotated[dict, Depends(require_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Posts liked by a user."""
    return await post_service.get_liked_posts(user_id)


@router.get("/user/{username}")
async def get_user_posts(
    username: str,
    user: Annotated[dict, Depends(require_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Posts by a user."""
    return await post_service.get_user_posts(username)


@router.post("/create", status_code=status.HTTP_201_CREATED)
async def create_post(
    body: CreatePostRequest,
    user: Annotated[dict, Depends(require_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Create a post with text and/or an image reference."""
    return await post_service.create_post(user["_id"], text=body.text, img=body.img)


@router.post("/like/{post_id}")
async def like_unlike_post(
    post_id: str,
    user: Annotated[dict, Depends(require_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Like the post, or unlike if already liked."""
    return await post_service.like_unlike_post(user["_id"], post_id)


@router.post("/comment/{post_id}")
async def comment_on_post(
    post_id: str,
    body: CommentRequest,
    user: Annotated[dict, Depends(require_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Comment on a post."""
    return await post_service.comment_on_post(user["_id"], post_id, body.text)


@router.delete("/{post_id}")
async def delete_post(
    post_id: str,
    user: Annotated[dict, Depends(require_user)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Delete one of your posts."""
    return await post_service.delete_post(user["_id"], post_id)
