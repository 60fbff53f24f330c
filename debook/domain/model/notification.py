"""Notification entity.

Notifications are materialized from interaction events and addressed to
the owner of the post that was interacted with.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from debook.domain.model.common import DomainModel
from debook.domain.value import (
    InteractionId,
    NotificationId,
    NotificationStatus,
    NotificationType,
    PostId,
    UserId,
)


class NotificationMetadata(DomainModel):
    """Source interaction details kept alongside a notification."""

    interaction_id: InteractionId
    content: Optional[str] = None


class Notification(DomainModel):
    """Notification entity.

    ``user_id`` is the recipient. Status starts as pending and moves to
    read through an explicit mark-as-read by the recipient.
    """

    id: NotificationId
    user_id: UserId
    actor_id: UserId
    post_id: PostId
    type: NotificationType
    status: NotificationStatus = NotificationStatus.PENDING
    message: str
    metadata: NotificationMetadata
    created_at: datetime = Field(default_factory=datetime.now)
