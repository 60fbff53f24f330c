"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from debook.application.usecase.base import BaseUseCase
from debook.application.usecase.post.response import PostResponse
from debook.domain.service import PostService
from debook.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: UUID


class GetPostUseCase(BaseUseCase):
    """Use case for retrieving a post by ID."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post(PostId(request.post_id))
        return PostResponse.from_post(post)
