"""Post aggregate root.

Posts carry denormalized like and comment counters that are kept in step
with the interactions table through atomic increments.
"""

from datetime import datetime

from pydantic import Field

from debook.domain.model.common import DomainModel
from debook.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    content: str = Field(min_length=1, max_length=500)
    author_id: UserId
    likes_count: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
