"""Interaction routes (likes and comments on a post)."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, Field

from debook.adapter.error import EventPublishError
from debook.application.usecase.interaction import (
    CommentOnPostRequest,
    CommentOnPostUseCase,
    GetPostInteractionsRequest,
    GetPostInteractionsUseCase,
    InteractionResponse,
    LikePostRequest,
    LikePostUseCase,
    UnlikePostRequest,
    UnlikePostUseCase,
)
from debook.domain.error import ConflictError, NotFoundError, ValidationError
from debook.domain.value import InteractionType, UserId
from debook.interface.api.auth import get_current_user_id

router = APIRouter(
    prefix="/posts/{post_id}", tags=["interactions"], route_class=DishkaRoute
)


class CommentAPIRequest(BaseModel):
    """API request for commenting on a post."""

    content: str = Field(max_length=1000)


def _publish_failed(e: EventPublishError) -> HTTPException:
    logfire.error("Interaction stored but event not published", error=str(e))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Failed to publish interaction event",
    )


@router.post(
    "/like",
    response_model=InteractionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def like_post(
    post_id: UUID,
    like_post_use_case: FromDishka[LikePostUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> InteractionResponse:
    """Like a post.

    Args:
        post_id: Post UUID
        like_post_use_case: Like post use case from DI
        user_id: Caller, from the x-user-id header

    Returns:
        Created like

    Raises:
        HTTPException: 404 if the post does not exist, 409 if already liked,
            500 if the event could not be published
    """
    try:
        return await like_post_use_case.execute(
            LikePostRequest(post_id=post_id, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except EventPublishError as e:
        raise _publish_failed(e)


@router.delete("/like", status_code=status.HTTP_204_NO_CONTENT)
async def unlike_post(
    post_id: UUID,
    unlike_post_use_case: FromDishka[UnlikePostUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> Response:
    """Remove the caller's like from a post.

    Raises:
        HTTPException: 404 if the caller has not liked the post
    """
    try:
        await unlike_post_use_case.execute(
            UnlikePostRequest(post_id=post_id, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/comment",
    response_model=InteractionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def comment_on_post(
    post_id: UUID,
    request: CommentAPIRequest,
    comment_use_case: FromDishka[CommentOnPostUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> InteractionResponse:
    """Comment on a post.

    Args:
        post_id: Post UUID
        request: Comment content
        comment_use_case: Comment use case from DI
        user_id: Caller, from the x-user-id header

    Returns:
        Created comment with trimmed content

    Raises:
        HTTPException: 400 if the content is blank, 404 if the post does not
            exist, 409 if the caller already commented, 500 if the event could
            not be published
    """
    try:
        return await comment_use_case.execute(
            CommentOnPostRequest(
                post_id=post_id, user_id=user_id, content=request.content
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except EventPublishError as e:
        raise _publish_failed(e)


@router.get("/interactions", response_model=list[InteractionResponse])
async def get_post_interactions(
    post_id: UUID,
    get_interactions_use_case: FromDishka[GetPostInteractionsUseCase],
    type: InteractionType | None = None,
    user_id: UserId = Depends(get_current_user_id),
) -> list[InteractionResponse]:
    """List the latest interactions on a post.

    Args:
        post_id: Post UUID
        get_interactions_use_case: Use case from DI
        type: Optional filter (like or comment)
        user_id: Caller, from the x-user-id header

    Returns:
        Up to 50 interactions, newest first
    """
    return await get_interactions_use_case.execute(
        GetPostInteractionsRequest(post_id=post_id, type=type)
    )
