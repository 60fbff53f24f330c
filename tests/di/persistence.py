"""Mock persistence providers for testing."""

from dishka import Scope, provide

from debook.domain.repository import (
    InteractionRepository,
    NotificationRepository,
    PostRepository,
    UnitOfWork,
)
from debook.persistence.repository.inmemory import (
    InMemoryInteractionRepository,
    InMemoryNotificationRepository,
    InMemoryPostRepository,
    InMemoryUnitOfWork,
)
from debook.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so their state survives across the requests
    of one container, like a database would. Every test builds its own
    container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_interaction_repository(self) -> InteractionRepository:
        """Provide in-memory interaction repository."""
        return InMemoryInteractionRepository()

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork()
