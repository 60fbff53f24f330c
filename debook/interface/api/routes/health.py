"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from debook.config import Settings
from debook.domain.service import InteractionEventPublisher

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    timestamp: datetime
    version: str
    git_sha: str


class BrokerHealthResponse(BaseModel):
    """Broker health check response."""

    status: str
    broker: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        service=settings.service,
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
    )


broker_router = APIRouter(tags=["health"], route_class=DishkaRoute)


@broker_router.get("/health/broker", response_model=BrokerHealthResponse)
async def broker_health_check(
    publisher: FromDishka[InteractionEventPublisher],
) -> BrokerHealthResponse:
    """Check that the event broker accepts messages.

    Returns:
        ``healthy`` if a ping could be published, ``unhealthy`` otherwise
    """
    healthy = await publisher.health_check()
    return BrokerHealthResponse(
        status="healthy" if healthy else "unhealthy",
        broker=healthy,
    )
