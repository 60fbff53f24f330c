"""Interaction event consumer."""

import asyncio
from contextlib import suppress
from typing import Any, Awaitable, Callable, Optional

import logfire
from aiokafka import AIOKafkaConsumer, ConsumerRecord
from aiokafka.errors import KafkaError

from debook.adapter.kafka.codec import InvalidEventError, parse_event
from debook.config import KafkaSettings
from debook.domain.model.event import InteractionEvent

EventHandler = Callable[[InteractionEvent], Awaitable[Any]]


class KafkaInteractionEventConsumer:
    """Consumes interaction events and hands them to a handler.

    Reads the interaction topic as one consumer group starting from the
    latest offset; events published before the group first connected are
    not seen. Offsets are auto-committed, so a message is consumed once it
    has been handed to ``process_message`` whatever the outcome.
    """

    def __init__(
        self,
        settings: KafkaSettings,
        handler: EventHandler,
        consumer_factory: Optional[Callable[[], AIOKafkaConsumer]] = None,
    ) -> None:
        """Initialize the consumer.

        Args:
            settings: Kafka settings
            handler: Coroutine called with each decoded event
            consumer_factory: Builds the underlying client (overridable in tests)
        """
        self.settings = settings
        self.handler = handler
        self._consumer_factory = consumer_factory or self._create_consumer
        self._consumer: AIOKafkaConsumer | None = None
        self._task: asyncio.Task | None = None

        logfire.info(
            "Kafka consumer initialized",
            client_id=settings.client_id,
            brokers=settings.bootstrap_servers,
            group_id=settings.group_id,
        )

    @property
    def running(self) -> bool:
        """Whether the consume loop is active."""
        return self._task is not None and not self._task.done()

    def _create_consumer(self) -> AIOKafkaConsumer:
        return AIOKafkaConsumer(
            self.settings.interaction_topic,
            bootstrap_servers=self.settings.bootstrap_servers,
            client_id=self.settings.client_id,
            group_id=self.settings.group_id,
            auto_offset_reset="latest",
            enable_auto_commit=True,
        )

    async def start(self) -> bool:
        """Connect, subscribe and start consuming in the background.

        Connection is retried ``connect_max_retries`` times with a fixed
        delay. When every attempt fails the consumer gives up without
        raising and the process keeps running without events.

        Returns:
            True if the consume loop was started
        """
        max_retries = self.settings.connect_max_retries
        delay = self.settings.connect_retry_delay

        for attempt in range(1, max_retries + 1):
            consumer = self._consumer_factory()
            logfire.info(
                "Connecting to Kafka",
                attempt=attempt,
                max_retries=max_retries,
                topic=self.settings.interaction_topic,
            )
            try:
                await consumer.start()
            except (KafkaError, OSError) as e:
                logfire.error(
                    "Kafka connection attempt failed", attempt=attempt, error=str(e)
                )
                await consumer.stop()

                if attempt == max_retries:
                    logfire.error(
                        "Max retries reached, Kafka consumer failed to start",
                        max_retries=max_retries,
                    )
                    return False

                logfire.info("Waiting before retry", delay_seconds=delay)
                await asyncio.sleep(delay)
                continue

            self._consumer = consumer
            self._task = asyncio.create_task(self._consume())
            logfire.info(
                "Kafka consumer running", topic=self.settings.interaction_topic
            )
            return True

        return False

    async def stop(self) -> None:
        """Stop the consume loop and disconnect."""
        if self._task is not None:
            self._task.cancel()
            with suppress(asyncio.CancelledError):
                await self._task
            self._task = None

        if self._consumer is not None:
            logfire.info("Disconnecting Kafka consumer")
            try:
                await self._consumer.stop()
                logfire.info("Kafka consumer disconnected")
            except KafkaError as e:
                logfire.error("Error disconnecting Kafka consumer", error=str(e))
            finally:
                self._consumer = None

    async def _consume(self) -> None:
        """Process messages one at a time in delivery order."""
        try:
            async for message in self._consumer:
                try:
                    await self.process_message(message)
                except Exception as e:
                    logfire.error(
                        "Skipping Kafka message after unexpected error",
                        topic=message.topic,
                        partition=message.partition,
                        offset=message.offset,
                        error=str(e),
                        _exc_info=True,
                    )
        except KafkaError as e:
            logfire.error("Kafka consume loop stopped", error=str(e))
        except Exception as e:
            logfire.error(
                "Kafka consume loop crashed", error=str(e), _exc_info=True
            )

    async def process_message(self, message: ConsumerRecord) -> None:
        """Decode one message and hand the event to the handler.

        Empty and undecodable messages are logged and dropped. Handler
        failures are logged; the message is not retried.

        Args:
            message: Record received from Kafka
        """
        key = (
            message.key.decode("utf-8", errors="replace") if message.key else "no-key"
        )

        with logfire.span(
            "kafka.process_message",
            topic=message.topic,
            partition=message.partition,
            offset=message.offset,
            key=key,
        ):
            if not message.value:
                logfire.warn(
                    "Empty message value",
                    topic=message.topic,
                    partition=message.partition,
                )
                return

            try:
                event = parse_event(message.value)
            except InvalidEventError as e:
                logfire.error(
                    "Dropping undecodable Kafka message",
                    topic=message.topic,
                    partition=message.partition,
                    offset=message.offset,
                    error=str(e),
                )
                return

            logfire.info(
                "Processing interaction event",
                type=event.type.value,
                post_id=str(event.post_id),
                owner_id=str(event.owner_id),
            )

            try:
                await self.handler(event)
            except Exception as e:
                logfire.error(
                    "Error processing Kafka message",
                    topic=message.topic,
                    partition=message.partition,
                    offset=message.offset,
                    key=key,
                    error=str(e),
                    _exc_info=True,
                )
                return

            logfire.debug("Event processing completed", interaction_id=str(event.id))
