"""
Activity Log Use Cases
"""

from .dtos import LogActivityCommand, LogActivityResponse, NotificationInfo
from .get_notifications_use_case import GetNotificationsUseCase
from .log_activity_use_case import LogActivityUseCase

__all__ = [
    "LogActivityUseCase",
    "GetNotificationsUseCase",
    "LogActivityCommand",
    "LogActivityResponse",
    "NotificationInfo",
]
