"""Kafka adapters for the interaction event channel."""

from .codec import InvalidEventError, parse_event, serialize_event
from .consumer import KafkaInteractionEventConsumer
from .producer import InMemoryInteractionEventPublisher, KafkaInteractionEventPublisher

__all__ = [
    "InMemoryInteractionEventPublisher",
    "InvalidEventError",
    "KafkaInteractionEventConsumer",
    "KafkaInteractionEventPublisher",
    "parse_event",
    "serialize_event",
]
