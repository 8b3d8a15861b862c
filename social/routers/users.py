"""
FastAPI router for user endpoints.

Profiles, suggestions, follow toggling and profile updates.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from social.dependencies import get_user_service, require_user
from social.schemas.user import UpdateUserRequest
from social.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/profile/{username}")
async def get_user_profile(
    username: str,
    user: Annotated[dict, Depends(require_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user's profile by username."""
    return await user_service.get_profile(username)


@router.get("/suggested")
async def get_suggested_users(
    user: Annotated[dict, Depends(require_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Suggest users to follow."""
    return await user_service.get_suggested_users(user["_id"])


@router.post("/follow/{user_id}")
async def follow_unfollow_user(
    user_id: str,
    user: Annotated[dict, Depends(require_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Follow the user, or unfollow if already following."""
    return await user_service.follow_unfollow(user["_id"], user_id)


@router.post("/update")
async def update_user(
    body: UpdateUserRequest,
    user: Annotated[dict, Depends(require_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """
    Update the current user's profile.

    Only provided fields are changed. Changing the password needs both
    currentPassword and newPassword.
    """
    return await user_service.update_user(user["_id"], body.model_dump(exclude_unset=True))
