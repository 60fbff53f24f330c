"""Notification response models."""

from datetime import datetime
from uuid import UUID

from debook.application.usecase.base import CamelModel
from debook.domain.model import Notification
from debook.domain.value import NotificationStatus, NotificationType


class NotificationMetadataResponse(CamelModel):
    """Source interaction of a notification."""

    interaction_id: UUID
    content: str | None = None


class NotificationResponse(CamelModel):
    """Notification as returned by the API."""

    id: UUID
    user_id: UUID
    actor_id: UUID
    post_id: UUID
    type: NotificationType
    status: NotificationStatus
    message: str
    metadata: NotificationMetadataResponse
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            id=notification.id,
            user_id=notification.user_id,
            actor_id=notification.actor_id,
            post_id=notification.post_id,
            type=notification.type,
            status=notification.status,
            message=notification.message,
            metadata=NotificationMetadataResponse(
                interaction_id=notification.metadata.interaction_id,
                content=notification.metadata.content,
            ),
            created_at=notification.created_at,
        )
