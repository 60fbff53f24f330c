"""Interaction event handler of the notification service."""

from dishka import AsyncContainer

from debook.application.usecase.notification import (
    CreateNotificationUseCase,
    NotificationResponse,
)
from debook.domain.model import InteractionEvent


class NotificationEventHandler:
    """Creates a notification for each consumed interaction event.

    Every event is handled in its own request scope, so it gets a fresh
    database session that is committed when the event has been handled.
    """

    def __init__(self, container: AsyncContainer) -> None:
        """Initialize the handler.

        Args:
            container: Application-scoped DI container
        """
        self.container = container

    async def __call__(self, event: InteractionEvent) -> NotificationResponse:
        async with self.container() as request_container:
            use_case = await request_container.get(CreateNotificationUseCase)
            return await use_case.execute(event)
