"""Interaction response model."""

from datetime import datetime
from uuid import UUID

from debook.application.usecase.base import CamelModel
from debook.domain.model import Interaction
from debook.domain.value import InteractionType


class InteractionResponse(CamelModel):
    """Interaction as returned by the API."""

    id: UUID
    user_id: UUID
    post_id: UUID
    type: InteractionType
    content: str | None = None
    created_at: datetime

    @classmethod
    def from_interaction(cls, interaction: Interaction) -> "InteractionResponse":
        return cls(
            id=interaction.id,
            user_id=interaction.user_id,
            post_id=interaction.post_id,
            type=interaction.type,
            content=interaction.content,
            created_at=interaction.created_at,
        )
