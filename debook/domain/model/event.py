"""Interaction event envelope.

The only artifact that crosses the boundary between the post service and
the notification service. It travels as flat camelCase JSON.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from debook.domain.model.common import DomainModel
from debook.domain.value import InteractionId, InteractionType, PostId, UserId


class InteractionEvent(DomainModel):
    """Interaction event published on like and comment.

    ``owner_id`` is the post author (the notification recipient) and
    ``actor_id`` the user who performed the interaction.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: InteractionId
    owner_id: UserId
    actor_id: UserId
    post_id: PostId
    type: InteractionType
    content: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
