"""Interaction entity.

A like or a comment a user makes on a post.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from debook.domain.model.common import DomainModel
from debook.domain.value import InteractionId, InteractionType, PostId, UserId


class Interaction(DomainModel):
    """Interaction entity.

    Business rules:
    - One interaction per (user, post, type) (database unique constraint)
    - Comments carry non-empty content, likes carry none
    """

    id: InteractionId
    user_id: UserId
    post_id: PostId
    type: InteractionType
    content: Optional[str] = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_comment_content(self) -> "Interaction":
        """Comments must have content."""
        if self.type == InteractionType.COMMENT and not (
            self.content and self.content.strip()
        ):
            raise ValueError("Comment content is required")
        return self
