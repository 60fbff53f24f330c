"""End-to-end tests for the notification service.

The consumer is not started here; events are handed to the handler
directly, as the consumer would after decoding them.
"""

from uuid import UUID, uuid4

import httpx
import pytest
import pytest_asyncio

from debook.domain.value import InteractionType, UserId
from debook.interface.api.app import create_notification_app
from debook.interface.consumer import NotificationEventHandler
from tests.conftest import make_event
from tests.di import build_test_container

OWNER_ID = "7c1d2e3f-4a5b-4c6d-8e9f-0a1b2c3d4e5f"


@pytest.fixture
def container():
    """Test container with in-memory persistence."""
    return build_test_container()


@pytest_asyncio.fixture
async def client(container):
    """Async client against the notification app (lifespan not run)."""
    app = create_notification_app(container)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as async_client:
        yield async_client
    await container.close()


async def consume(container, **kwargs):
    """Handle an event like the consumer would."""
    return await NotificationEventHandler(container)(make_event(**kwargs))


class TestNotifications:
    """Notification endpoints."""

    @pytest.mark.asyncio
    async def test_consumed_events_are_listed_for_the_owner(self, client, container):
        """Notifications are listed for the post owner only."""
        owner_id = UserId(UUID(OWNER_ID))
        await consume(container, owner_id=owner_id)
        await consume(
            container,
            interaction_type=InteractionType.COMMENT,
            content="Great post!",
            owner_id=owner_id,
        )

        mine = await client.get(
            "/api/v1/notifications", headers={"x-user-id": OWNER_ID}
        )
        theirs = await client.get(
            "/api/v1/notifications", headers={"x-user-id": str(uuid4())}
        )

        assert mine.status_code == 200
        assert len(mine.json()) == 2
        assert {n["type"] for n in mine.json()} == {"like", "comment"}
        assert all(n["userId"] == OWNER_ID for n in mine.json())
        assert all(n["status"] == "pending" for n in mine.json())
        assert theirs.json() == []

    @pytest.mark.asyncio
    async def test_pagination(self, client, container):
        """limit and offset page through the notifications."""
        owner_id = UserId(UUID(OWNER_ID))
        for _ in range(3):
            await consume(container, owner_id=owner_id)

        page = await client.get(
            "/api/v1/notifications",
            params={"limit": 2, "offset": 2},
            headers={"x-user-id": OWNER_ID},
        )

        assert len(page.json()) == 1

    @pytest.mark.asyncio
    async def test_mark_as_read(self, client, container):
        """Only the recipient can mark a notification as read."""
        notification = await consume(
            container, owner_id=UserId(UUID(OWNER_ID))
        )
        url = f"/api/v1/notifications/{notification.id}/read"

        forbidden = await client.patch(url, headers={"x-user-id": str(uuid4())})
        read = await client.patch(url, headers={"x-user-id": OWNER_ID})

        assert forbidden.status_code == 404
        assert read.status_code == 200
        assert read.json()["status"] == "read"
        assert read.json()["metadata"]["interactionId"] == str(
            notification.metadata.interaction_id
        )

    @pytest.mark.asyncio
    async def test_unread_count(self, client, container):
        """The unread count ignores pending notifications."""
        await consume(container, owner_id=UserId(UUID(OWNER_ID)))

        response = await client.get(
            "/api/v1/notifications/unread/count", headers={"x-user-id": OWNER_ID}
        )

        assert response.json() == {"count": 0}

    @pytest.mark.asyncio
    async def test_requests_need_x_user_id(self, client):
        """Missing or malformed x-user-id gives 401."""
        missing = await client.get("/api/v1/notifications")
        malformed = await client.get(
            "/api/v1/notifications/unread/count", headers={"x-user-id": "123"}
        )

        assert missing.status_code == 401
        assert malformed.status_code == 401

    @pytest.mark.asyncio
    async def test_malformed_notification_id_is_bad_request(self, client):
        """Notification IDs must be UUIDs."""
        response = await client.patch(
            "/api/v1/notifications/abc/read", headers={"x-user-id": OWNER_ID}
        )

        assert response.status_code == 400
