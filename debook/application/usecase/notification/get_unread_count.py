"""Get unread count use case."""

from uuid import UUID

from pydantic import BaseModel

from debook.application.usecase.base import BaseUseCase, CamelModel
from debook.domain.service import NotificationService
from debook.domain.value import UserId


class GetUnreadCountRequest(BaseModel):
    """Get unread count request."""

    user_id: UUID


class UnreadCountResponse(CamelModel):
    """Unread count response."""

    count: int


class GetUnreadCountUseCase(BaseUseCase):
    """Use case for counting a user's unread notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetUnreadCountRequest) -> UnreadCountResponse:
        count = await self.notification_service.get_unread_count(
            UserId(request.user_id)
        )
        return UnreadCountResponse(count=count)
