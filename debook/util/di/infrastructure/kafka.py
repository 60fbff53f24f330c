"""Kafka infrastructure providers."""

from dishka import Scope, provide

from debook.adapter.kafka import KafkaInteractionEventPublisher
from debook.config import KafkaSettings
from debook.domain.service import InteractionEventPublisher
from debook.util.di.base import ProviderBase


class KafkaProvider(ProviderBase):
    """Kafka component base."""

    __mock_component__ = "kafka"


class ProdKafkaProvider(KafkaProvider):
    """Production Kafka provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_event_publisher(
        self, kafka_settings: KafkaSettings
    ) -> InteractionEventPublisher:
        """Provide the interaction event publisher.

        The publisher is connected and disconnected by the API lifespan.

        Raises:
            ConfigurationError: If no Kafka brokers are configured
        """
        return KafkaInteractionEventPublisher(kafka_settings)
