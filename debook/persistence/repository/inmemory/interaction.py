"""In-memory interaction repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from debook.domain.model.interaction import Interaction
from debook.domain.repository.interaction import InteractionRepository
from debook.domain.value import InteractionId, InteractionType, PostId, UserId


class InMemoryInteractionRepository(InteractionRepository):
    """In-memory implementation of InteractionRepository for testing."""

    def __init__(self) -> None:
        self._interactions: list[Interaction] = []

    async def find_by_user_post_and_type(
        self,
        user_id: UserId,
        post_id: PostId,
        interaction_type: InteractionType,
    ) -> Optional[Interaction]:
        """Find a user's interaction of a given type on a post."""
        for interaction in self._interactions:
            if (
                interaction.user_id == user_id
                and interaction.post_id == post_id
                and interaction.type == interaction_type
            ):
                return interaction
        return None

    async def find_by_post(
        self,
        post_id: PostId,
        interaction_type: Optional[InteractionType] = None,
        limit: int = 50,
    ) -> list[Interaction]:
        """Find interactions on a post, newest first."""
        interactions = [i for i in self._interactions if i.post_id == post_id]

        if interaction_type is not None:
            interactions = [i for i in interactions if i.type == interaction_type]

        interactions.sort(key=lambda i: i.created_at, reverse=True)
        return interactions[:limit]

    async def save(self, interaction: Interaction) -> Interaction:
        """Save an interaction.

        Raises:
            IntegrityError: If the (user, post, type) triple already exists
        """
        existing = await self.find_by_user_post_and_type(
            interaction.user_id, interaction.post_id, interaction.type
        )
        if existing:
            raise IntegrityError("Duplicate interaction", None, Exception())

        self._interactions.append(interaction)
        return interaction

    async def delete(self, interaction_id: InteractionId) -> None:
        """Delete an interaction by ID."""
        self._interactions = [i for i in self._interactions if i.id != interaction_id]
