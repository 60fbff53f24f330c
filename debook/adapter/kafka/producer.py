"""Interaction event publishers."""

import asyncio

import logfire
from aiokafka import AIOKafkaProducer
from aiokafka.errors import KafkaError

from debook.adapter.error import EventPublishError
from debook.adapter.kafka.codec import serialize_event
from debook.config import KafkaSettings
from debook.domain.model.event import InteractionEvent
from debook.domain.service.event_publisher import InteractionEventPublisher
from debook.util.error import ConfigurationError

HEALTH_CHECK_TOPIC = "__health_check"


class KafkaInteractionEventPublisher(InteractionEventPublisher):
    """Publishes interaction events to Kafka.

    One message per event on the configured topic, keyed by post ID so that
    events of one post land on the same partition.
    """

    def __init__(self, settings: KafkaSettings) -> None:
        """Initialize the publisher.

        Args:
            settings: Kafka settings

        Raises:
            ConfigurationError: If no brokers are configured
        """
        if not settings.bootstrap_servers:
            raise ConfigurationError("At least one Kafka broker must be configured")

        self.settings = settings
        self._producer: AIOKafkaProducer | None = None

        logfire.info(
            "Kafka producer initialized",
            client_id=settings.client_id,
            brokers=settings.bootstrap_servers,
        )

    async def start(self) -> None:
        """Connect the producer.

        Raises:
            KafkaError: If the brokers cannot be reached
        """
        producer = AIOKafkaProducer(
            bootstrap_servers=self.settings.bootstrap_servers,
            client_id=self.settings.client_id,
        )
        logfire.info("Connecting Kafka producer")
        try:
            await producer.start()
        except KafkaError as e:
            logfire.error("Failed to connect Kafka producer", error=str(e))
            await producer.stop()
            raise
        self._producer = producer
        logfire.info("Kafka producer connected")

    async def stop(self) -> None:
        """Flush and disconnect the producer."""
        if self._producer is None:
            return

        logfire.info("Disconnecting Kafka producer")
        try:
            await self._producer.stop()
            logfire.info("Kafka producer disconnected")
        except KafkaError as e:
            logfire.error("Error disconnecting Kafka producer", error=str(e))
        finally:
            self._producer = None

    async def publish(self, event: InteractionEvent) -> None:
        """Publish an event and wait for the broker acknowledgement.

        Args:
            event: Event to publish

        Raises:
            EventPublishError: If the producer is not running, the send
                fails or the acknowledgement times out
        """
        topic = self.settings.interaction_topic
        if self._producer is None:
            raise EventPublishError("Kafka producer is not started")

        with logfire.span(
            "kafka.publish",
            topic=topic,
            interaction_id=str(event.id),
            type=event.type.value,
            post_id=str(event.post_id),
        ):
            logfire.debug(
                "Interaction event details",
                owner_id=str(event.owner_id),
                actor_id=str(event.actor_id),
                content_length=len(event.content) if event.content else 0,
            )
            try:
                await asyncio.wait_for(
                    self._producer.send_and_wait(
                        topic,
                        value=serialize_event(event),
                        key=str(event.post_id).encode("utf-8"),
                    ),
                    timeout=self.settings.send_timeout,
                )
            except (KafkaError, asyncio.TimeoutError) as e:
                logfire.error(
                    "Failed to emit interaction event",
                    interaction_id=str(event.id),
                    error=str(e) or type(e).__name__,
                )
                raise EventPublishError(
                    f"Failed to publish event for interaction {event.id}"
                ) from e

            logfire.info(
                "Interaction event emitted",
                type=event.type.value,
                post_id=str(event.post_id),
            )

    async def health_check(self) -> bool:
        """Send a ping to the health check topic."""
        if self._producer is None:
            return False

        try:
            await asyncio.wait_for(
                self._producer.send_and_wait(HEALTH_CHECK_TOPIC, value=b"ping"),
                timeout=self.settings.send_timeout,
            )
        except (KafkaError, asyncio.TimeoutError) as e:
            logfire.warn("Kafka health check failed", error=str(e) or type(e).__name__)
            return False
        return True


class InMemoryInteractionEventPublisher(InteractionEventPublisher):
    """In-memory publisher for testing.

    Records published events instead of talking to a broker. Set
    ``fail_with`` to make the next publishes raise ``EventPublishError``.
    """

    def __init__(self) -> None:
        self.events: list[InteractionEvent] = []
        self.payloads: list[tuple[bytes, bytes]] = []
        self.started = False
        self.fail_with: str | None = None

    async def start(self) -> None:
        """Mark the publisher as started."""
        self.started = True

    async def stop(self) -> None:
        """Mark the publisher as stopped."""
        self.started = False

    async def publish(self, event: InteractionEvent) -> None:
        """Record the event and its encoded (key, value) message."""
        if self.fail_with:
            raise EventPublishError(self.fail_with)
        self.events.append(event)
        self.payloads.append((str(event.post_id).encode("utf-8"), serialize_event(event)))

    async def health_check(self) -> bool:
        """Healthy while started."""
        return self.started
