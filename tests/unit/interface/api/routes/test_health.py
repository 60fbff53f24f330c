"""Unit tests for health routes."""

import pytest

from debook.adapter.kafka import InMemoryInteractionEventPublisher
from debook.config import Settings
from debook.interface.api.routes.health import broker_health_check, health_check


class TestHealthCheck:
    """Tests for the health endpoints."""

    @pytest.mark.asyncio
    async def test_reports_service(self):
        """The health check names the running service."""
        settings = Settings(service="notifications")

        response = await health_check(settings)

        assert response.status == "healthy"
        assert response.service == "notifications"
        assert response.git_sha == settings.git_sha

    @pytest.mark.asyncio
    async def test_broker_health_follows_publisher(self):
        """The broker check reflects the publisher health check."""
        publisher = InMemoryInteractionEventPublisher()

        unhealthy = await broker_health_check(publisher)
        await publisher.start()
        healthy = await broker_health_check(publisher)

        assert unhealthy.status == "unhealthy"
        assert unhealthy.broker is False
        assert healthy.status == "healthy"
        assert healthy.broker is True
