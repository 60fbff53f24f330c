"""Application layer DI providers."""

from dishka import Scope, provide

from debook.application.usecase.interaction import (
    CommentOnPostUseCase,
    GetPostInteractionsUseCase,
    LikePostUseCase,
    UnlikePostUseCase,
)
from debook.application.usecase.notification import (
    CreateNotificationUseCase,
    GetNotificationsUseCase,
    GetUnreadCountUseCase,
    MarkAsReadUseCase,
)
from debook.application.usecase.post import CreatePostUseCase, GetPostUseCase
from debook.domain.service import (
    InteractionService,
    NotificationService,
    PostService,
)
from debook.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    # Interaction use cases
    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(
        self, interaction_service: InteractionService
    ) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(interaction_service=interaction_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_post_use_case(
        self, interaction_service: InteractionService
    ) -> UnlikePostUseCase:
        """Provide unlike post use case."""
        return UnlikePostUseCase(interaction_service=interaction_service)

    @provide(scope=Scope.REQUEST)
    def get_comment_on_post_use_case(
        self, interaction_service: InteractionService
    ) -> CommentOnPostUseCase:
        """Provide comment use case."""
        return CommentOnPostUseCase(interaction_service=interaction_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_interactions_use_case(
        self, interaction_service: InteractionService
    ) -> GetPostInteractionsUseCase:
        """Provide get post interactions use case."""
        return GetPostInteractionsUseCase(interaction_service=interaction_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_create_notification_use_case(
        self, notification_service: NotificationService
    ) -> CreateNotificationUseCase:
        """Provide create notification use case."""
        return CreateNotificationUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_get_notifications_use_case(
        self, notification_service: NotificationService
    ) -> GetNotificationsUseCase:
        """Provide get notifications use case."""
        return GetNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        """Provide get unread count use case."""
        return GetUnreadCountUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_as_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAsReadUseCase:
        """Provide mark as read use case."""
        return MarkAsReadUseCase(notification_service=notification_service)
