"""In-memory repository implementations for testing."""

from .interaction import InMemoryInteractionRepository
from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryInteractionRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemoryUnitOfWork",
]
