"""Domain value types for Debook."""

from enum import Enum


class InteractionType(str, Enum):
    """Kind of interaction a user can have with a post."""

    LIKE = "like"
    COMMENT = "comment"


class NotificationType(str, Enum):
    """Kind of interaction a notification reports."""

    LIKE = "like"
    COMMENT = "comment"


class NotificationStatus(str, Enum):
    """Lifecycle status of a notification.

    Notifications are created ``pending`` and only ever move to ``read``.
    """

    PENDING = "pending"
    SENT = "sent"
    READ = "read"


class CounterField(str, Enum):
    """Denormalized post counters."""

    LIKES = "likes_count"
    COMMENTS = "comments_count"
