"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from debook.config import KafkaSettings, Settings
from debook.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_kafka_settings(self, settings: Settings) -> KafkaSettings:
        """Provide Kafka settings."""
        return settings.kafka
