"""FastAPI applications.

One module builds both services; the process picks one through
``Settings.service`` (see ``Settings.app_path``).
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debook.adapter.kafka import KafkaInteractionEventConsumer
from debook.config import Settings
from debook.domain.service import InteractionEventPublisher
from debook.interface.api.errors import register_exception_handlers
from debook.interface.api.routes import health, interactions, notifications, posts
from debook.interface.consumer import NotificationEventHandler
from debook.util.di.container import create_container, setup_di
from debook.util.observability import instrument_fastapi

API_PREFIX = "/api/v1"


@asynccontextmanager
async def api_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Connect the event publisher for the lifetime of the API."""
    container: AsyncContainer = app.state.dishka_container
    publisher = await container.get(InteractionEventPublisher)
    await publisher.start()
    try:
        yield
    finally:
        await publisher.stop()
        await container.close()


@asynccontextmanager
async def notification_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Consume interaction events for the lifetime of the notification service."""
    container: AsyncContainer = app.state.dishka_container
    settings = await container.get(Settings)
    consumer = KafkaInteractionEventConsumer(
        settings.kafka, NotificationEventHandler(container)
    )
    if not await consumer.start():
        logfire.error("Notification service running without event consumption")
    try:
        yield
    finally:
        await consumer.stop()
        await container.close()


def _create_app(
    settings: Settings, title: str, description: str, lifespan
) -> FastAPI:
    app_instance = FastAPI(
        title=title,
        description=description,
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Accept", "Origin", "x-user-id"],
    )

    register_exception_handlers(app_instance)
    return app_instance


def create_api_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the post and interaction API.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container (production container if omitted)
    """
    settings = Settings()
    app_instance = _create_app(
        settings,
        title="Debook API",
        description="Posts, likes and comments",
        lifespan=api_lifespan,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(health.broker_router)
    app_instance.include_router(posts.router, prefix=API_PREFIX)
    app_instance.include_router(interactions.router, prefix=API_PREFIX)

    return app_instance


def create_notification_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the notification service.

    Args:
        container: DI container (production container if omitted)
    """
    settings = Settings()
    app_instance = _create_app(
        settings,
        title="Debook Notifications",
        description="Notifications materialized from post interactions",
        lifespan=notification_lifespan,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(notifications.router, prefix=API_PREFIX)

    return app_instance


# App instances for uvicorn
# Note: Logfire must be configured before this module is imported
api_app = create_api_app()
notification_app = create_notification_app()
