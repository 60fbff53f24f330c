"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from debook.domain.model import Interaction, Notification, NotificationMetadata, Post
from debook.domain.value import (
    InteractionId,
    InteractionType,
    NotificationId,
    NotificationStatus,
    NotificationType,
    PostId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    """Normalize a UUID column value."""
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        likes_count=row["likes_count"],
        comments_count=row["comments_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_interaction(row: Dict[str, Any]) -> Interaction:
    """Convert database row to Interaction domain model.

    Args:
        row: Database row as dict

    Returns:
        Interaction domain model
    """
    return Interaction(
        id=InteractionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        post_id=PostId(_uuid(row["post_id"])),
        type=InteractionType(row["type"]),
        content=row.get("content"),
        created_at=row["created_at"],
    )


def interaction_to_dict(interaction: Interaction) -> Dict[str, Any]:
    """Convert Interaction domain model to database dict."""
    data = interaction.model_dump()
    data["type"] = interaction.type.value
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    metadata = row.get("metadata") or {}
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        actor_id=UserId(_uuid(row["actor_id"])),
        post_id=PostId(_uuid(row["post_id"])),
        type=NotificationType(row["type"]),
        status=NotificationStatus(row["status"]),
        message=row.get("message") or "",
        metadata=NotificationMetadata(
            interaction_id=InteractionId(_uuid(metadata["interactionId"])),
            content=metadata.get("content"),
        ),
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict.

    The metadata blob is stored as camelCase JSON.
    """
    return {
        "id": notification.id,
        "user_id": notification.user_id,
        "actor_id": notification.actor_id,
        "post_id": notification.post_id,
        "type": notification.type.value,
        "status": notification.status.value,
        "message": notification.message,
        "metadata": {
            "interactionId": str(notification.metadata.interaction_id),
            "content": notification.metadata.content,
        },
        "created_at": notification.created_at,
    }
