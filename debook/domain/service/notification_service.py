"""Notification domain service."""

from typing import List, Optional
from uuid import uuid4

import logfire

from debook.domain.error import NotFoundError
from debook.domain.model.event import InteractionEvent
from debook.domain.model.notification import Notification, NotificationMetadata
from debook.domain.repository import NotificationRepository
from debook.domain.value import (
    InteractionType,
    NotificationId,
    NotificationStatus,
    NotificationType,
    UserId,
)

from .base import Service

# Comment excerpts longer than this are cut and suffixed with "..."
MESSAGE_EXCERPT_LENGTH = 50


class NotificationService(Service):
    """Domain service for notification operations."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def create_notification(self, event: InteractionEvent) -> Notification:
        """Materialize a notification for the owner of the interacted post.

        Replaying the same event creates another notification.

        Args:
            event: Interaction event from the event channel

        Returns:
            Saved notification in pending status
        """
        with logfire.span(
            "notification_service.create_notification",
            user_id=str(event.owner_id),
            actor_id=str(event.actor_id),
            type=event.type.value,
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                user_id=event.owner_id,
                actor_id=event.actor_id,
                post_id=event.post_id,
                type=NotificationType(event.type.value),
                status=NotificationStatus.PENDING,
                message=self.generate_notification_message(event.type, event.content),
                metadata=NotificationMetadata(
                    interaction_id=event.id, content=event.content
                ),
            )

            saved = await self.notification_repository.save(notification)
            logfire.info("Notification created", notification_id=str(saved.id))
            return saved

    @staticmethod
    def generate_notification_message(
        interaction_type: InteractionType, content: Optional[str] = None
    ) -> str:
        """Build the human readable notification message.

        Args:
            interaction_type: Like or comment
            content: Comment text, if any

        Returns:
            Message such as 'User commented on your post: "Nice!"'
        """
        actor = "User"
        action = "liked" if interaction_type == InteractionType.LIKE else "commented on"

        if interaction_type == InteractionType.COMMENT and content:
            excerpt = content[:MESSAGE_EXCERPT_LENGTH]
            if len(content) > MESSAGE_EXCERPT_LENGTH:
                excerpt += "..."
            return f'{actor} {action} your post: "{excerpt}"'

        return f"{actor} {action} your post"

    async def get_notifications(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Notification]:
        """Get a user's notifications, newest first.

        Args:
            user_id: Recipient ID
            limit: Page size (not capped)
            offset: Number of notifications to skip
        """
        with logfire.span(
            "notification_service.get_notifications",
            user_id=str(user_id),
            limit=limit,
            offset=offset,
        ):
            notifications = await self.notification_repository.find_by_user(
                user_id, limit=limit, offset=offset
            )
            logfire.debug(
                "Notifications found", user_id=str(user_id), count=len(notifications)
            )
            return notifications

    async def mark_as_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification:
        """Mark a notification as read.

        Marking an already read notification succeeds and saves it again.

        Args:
            notification_id: Notification ID
            user_id: Recipient ID; notifications of other users are not visible

        Returns:
            Updated notification

        Raises:
            NotFoundError: If the user has no notification with this ID
        """
        with logfire.span(
            "notification_service.mark_as_read",
            notification_id=str(notification_id),
            user_id=str(user_id),
        ):
            notification = await self.notification_repository.find_by_id_and_user(
                notification_id, user_id
            )
            if not notification:
                logfire.warn(
                    "Notification not found",
                    notification_id=str(notification_id),
                    user_id=str(user_id),
                )
                raise NotFoundError("Notification", str(notification_id))

            logfire.debug(
                "Notification found",
                notification_id=str(notification_id),
                status=notification.status.value,
            )

            updated = notification.model_copy(
                update={"status": NotificationStatus.READ}
            )
            saved = await self.notification_repository.save(updated)
            logfire.info(
                "Notification marked as read", notification_id=str(notification_id)
            )
            return saved

    async def get_unread_count(self, user_id: UserId) -> int:
        """Count a user's unread notifications.

        Counts notifications in ``sent`` status. Nothing moves a notification
        to ``sent`` yet, so this is zero until a delivery step exists.

        Args:
            user_id: Recipient ID
        """
        with logfire.span(
            "notification_service.get_unread_count", user_id=str(user_id)
        ):
            count = await self.notification_repository.count_by_user_and_status(
                user_id, NotificationStatus.SENT
            )
            logfire.debug("Unread notifications counted", user_id=str(user_id), count=count)
            return count
