"""Domain value objects for Debook."""

from debook.domain.value.identifiers import (
    InteractionId,
    NotificationId,
    PostId,
    UserId,
)
from debook.domain.value.types import (
    CounterField,
    InteractionType,
    NotificationStatus,
    NotificationType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "InteractionId",
    "NotificationId",
    # Types
    "InteractionType",
    "NotificationType",
    "NotificationStatus",
    "CounterField",
]
