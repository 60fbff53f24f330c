"""Interaction repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from debook.domain.model.interaction import Interaction
from debook.domain.value import InteractionId, InteractionType, PostId, UserId


class InteractionRepository(ABC):
    """Repository for Interaction entity.

    Defines the contract for interaction persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_post_and_type(
        self,
        user_id: UserId,
        post_id: PostId,
        interaction_type: InteractionType,
    ) -> Optional[Interaction]:
        """Find a user's interaction of a given type on a post.

        Args:
            user_id: The acting user's ID
            post_id: The post's ID
            interaction_type: Like or comment

        Returns:
            The interaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        interaction_type: Optional[InteractionType] = None,
        limit: int = 50,
    ) -> List[Interaction]:
        """Find interactions on a post, newest first.

        Args:
            post_id: The post's ID
            interaction_type: Optional type filter
            limit: Maximum number of interactions to return

        Returns:
            List of interactions ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, interaction: Interaction) -> Interaction:
        """Save an interaction (create).

        Args:
            interaction: The interaction to save

        Returns:
            The saved interaction

        Raises:
            IntegrityError: If the (user, post, type) triple already exists
        """
        pass

    @abstractmethod
    async def delete(self, interaction_id: InteractionId) -> None:
        """Delete an interaction.

        Args:
            interaction_id: The interaction ID to delete
        """
        pass
