"""Domain layer DI providers."""

from dishka import Scope, provide

from debook.domain.repository import (
    InteractionRepository,
    NotificationRepository,
    PostRepository,
    UnitOfWork,
)
from debook.domain.service import (
    InteractionEventPublisher,
    InteractionService,
    NotificationService,
    PostService,
)
from debook.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request (or consumed event) gets fresh service instances with
    their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_interaction_service(
        self,
        interaction_repository: InteractionRepository,
        post_service: PostService,
        event_publisher: InteractionEventPublisher,
        unit_of_work: UnitOfWork,
    ) -> InteractionService:
        """Provide interaction domain service."""
        return InteractionService(
            interaction_repository=interaction_repository,
            post_service=post_service,
            event_publisher=event_publisher,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)
