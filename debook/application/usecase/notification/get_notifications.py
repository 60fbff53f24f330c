"""Get notifications use case."""

from uuid import UUID

from pydantic import BaseModel

from debook.application.usecase.base import BaseUseCase
from debook.application.usecase.notification.response import NotificationResponse
from debook.domain.service import NotificationService
from debook.domain.value import UserId


class GetNotificationsRequest(BaseModel):
    """Get notifications request."""

    user_id: UUID
    limit: int = 20
    offset: int = 0


class GetNotificationsUseCase(BaseUseCase):
    """Use case for listing a user's notifications, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: GetNotificationsRequest
    ) -> list[NotificationResponse]:
        notifications = await self.notification_service.get_notifications(
            UserId(request.user_id), request.limit, request.offset
        )
        return [NotificationResponse.from_notification(n) for n in notifications]
