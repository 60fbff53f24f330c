"""Comment on post use case."""

from uuid import UUID

from pydantic import BaseModel

from debook.application.usecase.base import BaseUseCase
from debook.application.usecase.interaction.response import InteractionResponse
from debook.domain.service import InteractionService
from debook.domain.value import PostId, UserId


class CommentOnPostRequest(BaseModel):
    """Comment on post request."""

    post_id: UUID
    user_id: UUID
    content: str | None


class CommentOnPostUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(self, interaction_service: InteractionService) -> None:
        """Initialize comment use case.

        Args:
            interaction_service: Interaction domain service
        """
        self.interaction_service = interaction_service

    async def execute(self, request: CommentOnPostRequest) -> InteractionResponse:
        """Execute comment flow.

        Args:
            request: Comment request

        Returns:
            Created comment with trimmed content

        Raises:
            ValidationError: If the content is blank
            NotFoundError: If the post does not exist
            ConflictError: If the user already commented on the post
            EventPublishError: If the comment was stored but its event was not published
        """
        interaction = await self.interaction_service.comment_on_post(
            PostId(request.post_id), UserId(request.user_id), request.content
        )
        return InteractionResponse.from_interaction(interaction)
