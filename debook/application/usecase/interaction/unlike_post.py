"""Unlike post use case."""

from uuid import UUID

from pydantic import BaseModel

from debook.application.usecase.base import BaseUseCase
from debook.domain.service import InteractionService
from debook.domain.value import PostId, UserId


class UnlikePostRequest(BaseModel):
    """Unlike post request."""

    post_id: UUID
    user_id: UUID


class UnlikePostUseCase(BaseUseCase):
    """Use case for removing a like."""

    def __init__(self, interaction_service: InteractionService) -> None:
        self.interaction_service = interaction_service

    async def execute(self, request: UnlikePostRequest) -> None:
        """Remove the user's like.

        Raises:
            NotFoundError: If the user has not liked the post
        """
        await self.interaction_service.unlike_post(
            PostId(request.post_id), UserId(request.user_id)
        )
