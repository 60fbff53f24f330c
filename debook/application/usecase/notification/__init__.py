"""Notification use cases."""

from .create_notification import CreateNotificationUseCase
from .get_notifications import GetNotificationsRequest, GetNotificationsUseCase
from .get_unread_count import (
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    UnreadCountResponse,
)
from .mark_as_read import MarkAsReadRequest, MarkAsReadUseCase
from .response import NotificationMetadataResponse, NotificationResponse

__all__ = [
    "CreateNotificationUseCase",
    "GetNotificationsRequest",
    "GetNotificationsUseCase",
    "GetUnreadCountRequest",
    "GetUnreadCountUseCase",
    "MarkAsReadRequest",
    "MarkAsReadUseCase",
    "NotificationMetadataResponse",
    "NotificationResponse",
    "UnreadCountResponse",
]
