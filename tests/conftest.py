"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

from debook.domain.model import InteractionEvent, Post
from debook.domain.value import (
    InteractionId,
    InteractionType,
    PostId,
    UserId,
)


def make_post(
    author_id: UserId | None = None,
    content: str = "Test post content",
    likes_count: int = 0,
    comments_count: int = 0,
) -> Post:
    """Build a post with sensible defaults for tests."""
    now = datetime.now()
    return Post(
        id=PostId(uuid4()),
        content=content,
        author_id=author_id or UserId(uuid4()),
        likes_count=likes_count,
        comments_count=comments_count,
        created_at=now,
        updated_at=now,
    )


def make_event(
    interaction_type: InteractionType = InteractionType.LIKE,
    content: str | None = None,
    owner_id: UserId | None = None,
    actor_id: UserId | None = None,
) -> InteractionEvent:
    """Build an interaction event with random identifiers."""
    return InteractionEvent(
        id=InteractionId(uuid4()),
        owner_id=owner_id or UserId(uuid4()),
        actor_id=actor_id or UserId(uuid4()),
        post_id=PostId(uuid4()),
        type=interaction_type,
        content=content,
        created_at=datetime(2025, 1, 4, 10, 0, 0),
    )
