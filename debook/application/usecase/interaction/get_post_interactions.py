"""Get post interactions use case."""

from uuid import UUID

from pydantic import BaseModel

from debook.application.usecase.base import BaseUseCase
from debook.application.usecase.interaction.response import InteractionResponse
from debook.domain.service import InteractionService
from debook.domain.value import InteractionType, PostId


class GetPostInteractionsRequest(BaseModel):
    """Get post interactions request."""

    post_id: UUID
    type: InteractionType | None = None


class GetPostInteractionsUseCase(BaseUseCase):
    """Use case for listing the latest interactions on a post."""

    def __init__(self, interaction_service: InteractionService) -> None:
        self.interaction_service = interaction_service

    async def execute(
        self, request: GetPostInteractionsRequest
    ) -> list[InteractionResponse]:
        interactions = await self.interaction_service.get_post_interactions(
            PostId(request.post_id), request.type
        )
        return [InteractionResponse.from_interaction(i) for i in interactions]
