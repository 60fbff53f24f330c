"""Repository interfaces for Debook domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from debook.domain.repository.interaction import InteractionRepository
from debook.domain.repository.notification import NotificationRepository
from debook.domain.repository.post import PostRepository
from debook.domain.repository.unit_of_work import UnitOfWork

__all__ = [
    "PostRepository",
    "InteractionRepository",
    "NotificationRepository",
    "UnitOfWork",
]
