"""Mark notification as read use case."""

from uuid import UUID

from pydantic import BaseModel

from debook.application.usecase.base import BaseUseCase
from debook.application.usecase.notification.response import NotificationResponse
from debook.domain.service import NotificationService
from debook.domain.value import NotificationId, UserId


class MarkAsReadRequest(BaseModel):
    """Mark as read request."""

    notification_id: UUID
    user_id: UUID


class MarkAsReadUseCase(BaseUseCase):
    """Use case for marking one of the user's notifications as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark as read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: MarkAsReadRequest) -> NotificationResponse:
        """Mark the notification as read.

        Args:
            request: Notification ID and the requesting user

        Returns:
            Updated notification

        Raises:
            NotFoundError: If the user has no notification with that ID
        """
        notification = await self.notification_service.mark_as_read(
            NotificationId(request.notification_id), UserId(request.user_id)
        )
        return NotificationResponse.from_notification(notification)
