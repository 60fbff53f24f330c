"""Mock providers for testing."""

from .kafka import MockKafkaProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockKafkaProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
