"""Create notification use case."""

import logfire

from debook.application.usecase.base import BaseUseCase
from debook.application.usecase.notification.response import NotificationResponse
from debook.domain.model import InteractionEvent
from debook.domain.service import NotificationService


class CreateNotificationUseCase(BaseUseCase):
    """Use case for materializing a notification from an interaction event.

    Invoked by the event consumer, once per delivered event. Redelivered
    events produce another notification.
    """

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize create notification use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: InteractionEvent) -> NotificationResponse:
        """Create a notification for the owner of the interacted post.

        Args:
            request: Decoded interaction event

        Returns:
            Created notification
        """
        notification = await self.notification_service.create_notification(request)
        logfire.info(
            "Notification created from event",
            notification_id=str(notification.id),
            interaction_id=str(request.id),
        )
        return NotificationResponse.from_notification(notification)
