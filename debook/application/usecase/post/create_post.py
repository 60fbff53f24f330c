"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel

from debook.application.usecase.base import BaseUseCase
from debook.application.usecase.post.response import PostResponse
from debook.domain.service import PostService
from debook.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    content: str
    author_id: UUID  # User ID from the x-user-id header


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Create a post with zeroed counters.

        Args:
            request: Create post request

        Returns:
            Created post

        Raises:
            pydantic.ValidationError: If the content is empty or too long
        """
        post = await self.post_service.create_post(
            request.content, UserId(request.author_id)
        )
        return PostResponse.from_post(post)
