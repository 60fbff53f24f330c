"""Unit tests for row <-> domain model mappers."""

from datetime import datetime
from uuid import uuid4

from debook.domain.model import Interaction, Notification, NotificationMetadata
from debook.domain.value import (
    InteractionId,
    InteractionType,
    NotificationId,
    NotificationStatus,
    NotificationType,
    PostId,
    UserId,
)
from debook.persistence.mappers import (
    interaction_to_dict,
    notification_to_dict,
    post_to_dict,
    row_to_interaction,
    row_to_notification,
    row_to_post,
)
from tests.conftest import make_post


class TestPostMapping:
    """Tests for post mapping."""

    def test_post_row_round_trip(self):
        """A post survives conversion to a row and back."""
        post = make_post(likes_count=2, comments_count=1)

        assert row_to_post(post_to_dict(post)) == post

    def test_string_uuids_are_normalized(self):
        """Rows with string UUIDs map to UUID identifiers."""
        post = make_post()
        row = post_to_dict(post)
        row["id"] = str(row["id"])
        row["author_id"] = str(row["author_id"])

        assert row_to_post(row) == post


class TestInteractionMapping:
    """Tests for interaction mapping."""

    def test_comment_row_uses_enum_value(self):
        """The interaction type is stored as its enum value."""
        comment = Interaction(
            id=InteractionId(uuid4()),
            user_id=UserId(uuid4()),
            post_id=PostId(uuid4()),
            type=InteractionType.COMMENT,
            content="Hello",
            created_at=datetime(2025, 1, 4, 10, 0, 0),
        )

        row = interaction_to_dict(comment)

        assert row["type"] == "comment"
        assert row_to_interaction(row) == comment


class TestNotificationMapping:
    """Tests for notification mapping."""

    def test_metadata_is_stored_as_camel_case_json(self):
        """Metadata keeps the source interaction under camelCase keys."""
        interaction_id = InteractionId(uuid4())
        notification = Notification(
            id=NotificationId(uuid4()),
            user_id=UserId(uuid4()),
            actor_id=UserId(uuid4()),
            post_id=PostId(uuid4()),
            type=NotificationType.COMMENT,
            status=NotificationStatus.PENDING,
            message='User commented on your post: "Hi"',
            metadata=NotificationMetadata(interaction_id=interaction_id, content="Hi"),
            created_at=datetime(2025, 1, 4, 10, 0, 0),
        )

        row = notification_to_dict(notification)

        assert row["metadata"] == {"interactionId": str(interaction_id), "content": "Hi"}
        assert row["status"] == "pending"
        assert row_to_notification(row) == notification
