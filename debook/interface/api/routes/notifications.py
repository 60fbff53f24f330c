"""Notification routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status

from debook.application.usecase.notification import (
    GetNotificationsRequest,
    GetNotificationsUseCase,
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    MarkAsReadRequest,
    MarkAsReadUseCase,
    NotificationResponse,
    UnreadCountResponse,
)
from debook.domain.error import NotFoundError
from debook.domain.value import UserId
from debook.interface.api.auth import get_current_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=list[NotificationResponse])
async def get_notifications(
    get_notifications_use_case: FromDishka[GetNotificationsUseCase],
    limit: int = 20,
    offset: int = 0,
    user_id: UserId = Depends(get_current_user_id),
) -> list[NotificationResponse]:
    """List the caller's notifications, newest first.

    Args:
        get_notifications_use_case: Use case from DI
        limit: Page size
        offset: Number of notifications to skip
        user_id: Recipient, from the x-user-id header

    Returns:
        Notifications page
    """
    return await get_notifications_use_case.execute(
        GetNotificationsRequest(user_id=user_id, limit=limit, offset=offset)
    )


@router.get("/unread/count", response_model=UnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> UnreadCountResponse:
    """Count the caller's unread notifications."""
    return await get_unread_count_use_case.execute(
        GetUnreadCountRequest(user_id=user_id)
    )


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
async def mark_as_read(
    notification_id: UUID,
    mark_as_read_use_case: FromDishka[MarkAsReadUseCase],
    user_id: UserId = Depends(get_current_user_id),
) -> NotificationResponse:
    """Mark one of the caller's notifications as read.

    Raises:
        HTTPException: 404 if the caller has no notification with that ID
    """
    try:
        return await mark_as_read_use_case.execute(
            MarkAsReadRequest(notification_id=notification_id, user_id=user_id)
        )
    except NotFoundError as e:
        logfire.warn(
            "Notification not found for user",
            notification_id=str(notification_id),
            user_id=str(user_id),
        )
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
