"""Domain model entities for Debook."""

from debook.domain.model.event import InteractionEvent
from debook.domain.model.interaction import Interaction
from debook.domain.model.notification import Notification, NotificationMetadata
from debook.domain.model.post import Post

__all__ = [
    "Post",
    "Interaction",
    "InteractionEvent",
    "Notification",
    "NotificationMetadata",
]
