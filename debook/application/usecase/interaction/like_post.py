"""Like post use case."""

from uuid import UUID

from pydantic import BaseModel

from debook.application.usecase.base import BaseUseCase
from debook.application.usecase.interaction.response import InteractionResponse
from debook.domain.service import InteractionService
from debook.domain.value import PostId, UserId


class LikePostRequest(BaseModel):
    """Like post request."""

    post_id: UUID
    user_id: UUID


class LikePostUseCase(BaseUseCase):
    """Use case for liking a post."""

    def __init__(self, interaction_service: InteractionService) -> None:
        """Initialize like post use case.

        Args:
            interaction_service: Interaction domain service
        """
        self.interaction_service = interaction_service

    async def execute(self, request: LikePostRequest) -> InteractionResponse:
        """Execute like flow.

        Args:
            request: Like post request

        Returns:
            Created like

        Raises:
            NotFoundError: If the post does not exist
            ConflictError: If the user already liked the post
            EventPublishError: If the like was stored but its event was not published
        """
        interaction = await self.interaction_service.like_post(
            PostId(request.post_id), UserId(request.user_id)
        )
        return InteractionResponse.from_interaction(interaction)
