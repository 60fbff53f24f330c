"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from debook.domain.model.notification import Notification
from debook.domain.value import NotificationId, NotificationStatus, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Every lookup is scoped to the recipient so that a notification owned
    by another user is never returned.
    """

    @abstractmethod
    async def find_by_id_and_user(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Optional[Notification]:
        """Find a notification by ID for its recipient.

        Args:
            notification_id: The notification's ID
            user_id: The recipient's ID

        Returns:
            The notification if it exists and belongs to the user, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Notification]:
        """Find a user's notifications, newest first.

        Args:
            user_id: The recipient's ID
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_by_user_and_status(
        self, user_id: UserId, status: NotificationStatus
    ) -> int:
        """Count a user's notifications in a given status.

        Args:
            user_id: The recipient's ID
            status: Status to filter on

        Returns:
            Number of matching notifications
        """
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update).

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass
