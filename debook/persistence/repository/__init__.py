"""PostgreSQL repository implementations."""

from debook.persistence.repository.interaction import PostgresInteractionRepository
from debook.persistence.repository.notification import PostgresNotificationRepository
from debook.persistence.repository.post import PostgresPostRepository
from debook.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "PostgresPostRepository",
    "PostgresInteractionRepository",
    "PostgresNotificationRepository",
    "SqlAlchemyUnitOfWork",
]
