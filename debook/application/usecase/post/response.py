"""Post response model."""

from datetime import datetime
from uuid import UUID

from debook.application.usecase.base import CamelModel
from debook.domain.model import Post


class PostResponse(CamelModel):
    """Post as returned by the API."""

    id: UUID
    content: str
    author_id: UUID
    likes_count: int
    comments_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            content=post.content,
            author_id=post.author_id,
            likes_count=post.likes_count,
            comments_count=post.comments_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
