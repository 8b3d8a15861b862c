"""
FastAPI router for notification endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import message_response
from social.dependencies import get_notification_service, require_user
from social.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("")
async def get_notifications(
    user: Annotated[dict, Depends(require_user)],
    notification_service: Annotated[NotificationService, Depends(get_notification_service)],
):
    """List notifications, newest first, marking them read."""
    return await notification_service.get_notifications(user["_id"])


@router.delete("")
async def delete_notifications(
    user: Annotated[dict, Depends(require_user)],
    notification_service: Annotated[NotificationService, Depends(get_notification_service)],
):
    """Delete all of your notifications."""
    await notification_service.delete_notifications(user["_id"])
    return message_response("Notifications deleted successfully")
