"""Domain services."""

from .base import Service
from .event_publisher import InteractionEventPublisher
from .interaction_service import InteractionService
from .notification_service import NotificationService
from .post_service import PostService

__all__ = [
    "InteractionEventPublisher",
    "InteractionService",
    "NotificationService",
    "PostService",
    "Service",
]
