"""
Activity Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import Notification, User


class LogActivityCommand(BaseModel):
    """Activity to record; at least one of agency_id / sub_account_id"""

    description: str
    agency_id: Optional[UUID] = None
    sub_account_id: Optional[UUID] = None


class LogActivityResponse(BaseModel):
    """status is "logged", or "skipped" when no actor could be resolved"""

    status: str
    notification_id: Optional[str]


class NotificationInfo(BaseModel):
    """Notification with the acting user's display data"""

    id: str
    notification: str
    agency_id: str
    sub_account_id: Optional[str]
    user_id: str
    user_name: str
    user_avatar_url: str
    created_at: str


def to_notification_info(notification: Notification, user: User) -> NotificationInfo:
    return NotificationInfo(
        id=str(notification.id),
        notification=notification.notification,
        agency_id=str(notification.agency_id),
        sub_account_id=(
            str(notification.sub_account_id) if notification.sub_account_id else None
        ),
        user_id=user.id,
        user_name=user.name,
        user_avatar_url=user.avatar_url,
        created_at=notification.created_at.isoformat(),
    )
