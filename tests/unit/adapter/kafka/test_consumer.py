"""Unit tests for KafkaInteractionEventConsumer."""

import asyncio
from types import SimpleNamespace
from unittest.mock import patch

import pytest
from aiokafka.errors import KafkaConnectionError

from debook.adapter.kafka import KafkaInteractionEventConsumer, serialize_event
from debook.config import KafkaSettings
from debook.domain.value import InteractionType
from tests.conftest import make_event


def make_record(value: bytes | None, key: bytes | None = b"post-key"):
    """Build a stand-in for an aiokafka ConsumerRecord."""
    return SimpleNamespace(
        topic="interaction.created", partition=0, offset=7, key=key, value=value
    )


class FakeConsumerClient:
    """Stand-in for AIOKafkaConsumer."""

    def __init__(self, messages=(), fail_start: bool = False) -> None:
        self.messages = list(messages)
        self.fail_start = fail_start
        self.started = False
        self.stopped = False

    async def start(self) -> None:
        if self.fail_start:
            raise KafkaConnectionError("connection refused")
        self.started = True

    async def stop(self) -> None:
        self.stopped = True

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for message in self.messages:
            yield message
        # Block like a real consumer waiting for new messages
        await asyncio.Event().wait()


class RecordingHandler:
    """Handler that records events and signals when it was called."""

    def __init__(self, error: Exception | None = None) -> None:
        self.events = []
        self.error = error
        self.called = asyncio.Event()

    async def __call__(self, event):
        self.events.append(event)
        self.called.set()
        if self.error:
            raise self.error


def _settings(**overrides) -> KafkaSettings:
    return KafkaSettings(connect_retry_delay=0, **overrides)


class TestProcessMessage:
    """Tests for per-message handling."""

    @pytest.mark.asyncio
    async def test_valid_message_is_handed_to_handler(self):
        """Decoded events reach the handler."""
        handler = RecordingHandler()
        consumer = KafkaInteractionEventConsumer(_settings(), handler)
        event = make_event(InteractionType.COMMENT, content="Nice!")

        await consumer.process_message(make_record(serialize_event(event)))

        assert handler.events == [event]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [None, b""])
    async def test_empty_message_is_dropped(self, value):
        """Messages without a value are skipped."""
        handler = RecordingHandler()
        consumer = KafkaInteractionEventConsumer(_settings(), handler)

        await consumer.process_message(make_record(value, key=None))

        assert handler.events == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [b"{not json", b'{"type": "like"}'])
    async def test_undecodable_message_is_dropped(self, value):
        """Invalid payloads are logged and skipped without raising."""
        handler = RecordingHandler()
        consumer = KafkaInteractionEventConsumer(_settings(), handler)

        await consumer.process_message(make_record(value))

        assert handler.events == []

    @pytest.mark.asyncio
    async def test_handler_failure_does_not_propagate(self):
        """Handler errors are logged, not raised."""
        handler = RecordingHandler(error=RuntimeError("database down"))
        consumer = KafkaInteractionEventConsumer(_settings(), handler)
        event = make_event()

        await consumer.process_message(make_record(serialize_event(event)))

        assert handler.events == [event]

    @pytest.mark.asyncio
    async def test_non_utf8_key_does_not_block_event(self):
        """A key that is not valid UTF-8 is still logged and the event handled."""
        handler = RecordingHandler()
        consumer = KafkaInteractionEventConsumer(_settings(), handler)
        event = make_event()

        await consumer.process_message(
            make_record(serialize_event(event), key=b"\xff\xfe")
        )

        assert handler.events == [event]


class TestStartAndStop:
    """Tests for connection retries and the consume loop."""

    @pytest.mark.asyncio
    async def test_retries_until_connected_then_consumes(self):
        """Failed connection attempts are retried before consuming."""
        # Arrange
        event = make_event()
        clients = [
            FakeConsumerClient(fail_start=True),
            FakeConsumerClient(fail_start=True),
            FakeConsumerClient(messages=[make_record(serialize_event(event))]),
        ]
        handler = RecordingHandler()
        consumer = KafkaInteractionEventConsumer(
            _settings(connect_max_retries=3),
            handler,
            consumer_factory=lambda: clients.pop(0),
        )
        failed_attempts = clients[:2]
        connected = clients[2]

        # Act
        started = await consumer.start()
        await asyncio.wait_for(handler.called.wait(), timeout=1)

        # Assert
        assert started is True
        assert consumer.running is True
        assert all(c.stopped for c in failed_attempts)
        assert handler.events == [event]

        await consumer.stop()
        assert connected.stopped is True
        assert consumer.running is False

    @pytest.mark.asyncio
    async def test_keeps_consuming_after_bad_messages(self):
        """A message that fails unexpectedly does not stop the loop."""
        # Arrange
        first, second, third = make_event(), make_event(), make_event()
        client = FakeConsumerClient(
            messages=[
                make_record(serialize_event(first), key=b"\xff"),
                make_record(serialize_event(second)),
                make_record(serialize_event(third)),
            ]
        )
        handler = RecordingHandler()
        consumer = KafkaInteractionEventConsumer(
            _settings(), handler, consumer_factory=lambda: client
        )

        # Act
        with patch(
            "debook.adapter.kafka.consumer.parse_event",
            side_effect=[first, RuntimeError("unexpected"), third],
        ):
            await consumer.start()
            for _ in range(50):
                if len(handler.events) == 2:
                    break
                await asyncio.sleep(0.01)

        # Assert
        assert handler.events == [first, third]
        assert consumer.running is True

        await consumer.stop()

    @pytest.mark.asyncio
    async def test_gives_up_after_max_retries(self):
        """After the last failed attempt the consumer gives up quietly."""
        attempts = []

        def factory():
            client = FakeConsumerClient(fail_start=True)
            attempts.append(client)
            return client

        consumer = KafkaInteractionEventConsumer(
            _settings(connect_max_retries=2), RecordingHandler(), consumer_factory=factory
        )

        started = await consumer.start()

        assert started is False
        assert consumer.running is False
        assert len(attempts) == 2

        # Stopping a consumer that never started is a no-op
        await consumer.stop()
