"""Unit tests for notification use cases."""

from uuid import uuid4

import pytest

from debook.application.usecase.notification import (
    CreateNotificationUseCase,
    GetNotificationsRequest,
    GetNotificationsUseCase,
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    MarkAsReadRequest,
    MarkAsReadUseCase,
)
from debook.domain.error import NotFoundError
from debook.domain.value import InteractionType, NotificationStatus
from tests.conftest import make_event
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestNotificationUseCases:
    """Tests for the notification use cases."""

    @pytest.mark.asyncio
    async def test_create_list_and_mark_as_read(self, unit_env):
        """A consumed event becomes a notification the owner can read."""
        # Arrange
        create_use_case = await unit_env.get(CreateNotificationUseCase)
        list_use_case = await unit_env.get(GetNotificationsUseCase)
        mark_use_case = await unit_env.get(MarkAsReadUseCase)
        event = make_event(InteractionType.COMMENT, content="Interesting")

        # Act
        created = await create_use_case.execute(event)
        listed = await list_use_case.execute(
            GetNotificationsRequest(user_id=event.owner_id)
        )
        read = await mark_use_case.execute(
            MarkAsReadRequest(notification_id=created.id, user_id=event.owner_id)
        )

        # Assert
        assert [n.id for n in listed] == [created.id]
        assert created.status == NotificationStatus.PENDING
        assert read.status == NotificationStatus.READ

        data = read.model_dump(by_alias=True, mode="json")
        assert data["userId"] == str(event.owner_id)
        assert data["actorId"] == str(event.actor_id)
        assert data["metadata"] == {
            "interactionId": str(event.id),
            "content": "Interesting",
        }

    @pytest.mark.asyncio
    async def test_mark_as_read_for_other_user_not_found(self, unit_env):
        """Other users cannot mark the notification as read."""
        create_use_case = await unit_env.get(CreateNotificationUseCase)
        mark_use_case = await unit_env.get(MarkAsReadUseCase)
        created = await create_use_case.execute(make_event())

        with pytest.raises(NotFoundError):
            await mark_use_case.execute(
                MarkAsReadRequest(notification_id=created.id, user_id=uuid4())
            )

    @pytest.mark.asyncio
    async def test_unread_count(self, unit_env):
        """Pending notifications do not count as unread."""
        create_use_case = await unit_env.get(CreateNotificationUseCase)
        count_use_case = await unit_env.get(GetUnreadCountUseCase)
        event = make_event()
        await create_use_case.execute(event)

        response = await count_use_case.execute(
            GetUnreadCountRequest(user_id=event.owner_id)
        )

        assert response.count == 0
