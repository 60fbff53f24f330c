"""Post routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from debook.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    PostResponse,
)
from debook.domain.error import NotFoundError
from debook.domain.value import UserId
from debook.interface.api.auth import get_current_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    content: str = Field(min_length=1, max_length=500)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> PostResponse:
    """Create a new post.

    Args:
        request: Post content
        create_post_use_case: Create post use case from DI
        user_id: Author, from the x-user-id header

    Returns:
        Created post with zeroed counters
    """
    return await create_post_use_case.execute(
        CreatePostRequest(content=request.content, author_id=user_id)
    )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> PostResponse:
    """Get a post with its counters.

    Raises:
        HTTPException: 404 if the post does not exist
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError as e:
        logfire.warn("Post not found", post_id=str(post_id), user_id=str(user_id))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
