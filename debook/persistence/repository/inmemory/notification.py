"""In-memory notification repository for testing."""

from typing import Optional

from debook.domain.model.notification import Notification
from debook.domain.repository.notification import NotificationRepository
from debook.domain.value import NotificationId, NotificationStatus, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def find_by_id_and_user(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Optional[Notification]:
        """Find a notification by ID for its recipient."""
        notification = self._notifications.get(notification_id)
        if notification and notification.user_id == user_id:
            return notification
        return None

    async def find_by_user(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Notification]:
        """Find a user's notifications, newest first."""
        notifications = [
            n for n in self._notifications.values() if n.user_id == user_id
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_by_user_and_status(
        self, user_id: UserId, status: NotificationStatus
    ) -> int:
        """Count a user's notifications in a given status."""
        return sum(
            1
            for n in self._notifications.values()
            if n.user_id == user_id and n.status == status
        )

    async def save(self, notification: Notification) -> Notification:
        """Save or update a notification."""
        self._notifications[notification.id] = notification
        return notification
