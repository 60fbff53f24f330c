"""Unit tests for NotificationEventHandler."""

import pytest

from debook.domain.service import NotificationService
from debook.domain.value import InteractionType, NotificationStatus
from debook.interface.consumer import NotificationEventHandler
from tests.conftest import make_event
from tests.di import build_test_container


class TestNotificationEventHandler:
    """Tests for the consumer-side event handler."""

    @pytest.mark.asyncio
    async def test_each_event_creates_a_notification(self):
        """Handled events are persisted as pending notifications."""
        # Arrange
        container = build_test_container()
        handler = NotificationEventHandler(container)
        event = make_event(InteractionType.COMMENT, content="Well said")

        # Act
        response = await handler(event)
        await handler(event)

        # Assert
        assert response.user_id == event.owner_id
        assert response.status == NotificationStatus.PENDING
        assert response.message == 'User commented on your post: "Well said"'

        async with container() as request_container:
            service = await request_container.get(NotificationService)
            notifications = await service.get_notifications(event.owner_id)
        assert len(notifications) == 2

        await container.close()
