"""Interaction domain service."""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from debook.domain.error import ConflictError, NotFoundError, ValidationError
from debook.domain.model.event import InteractionEvent
from debook.domain.model.interaction import Interaction
from debook.domain.repository import InteractionRepository, UnitOfWork
from debook.domain.value import (
    CounterField,
    InteractionId,
    InteractionType,
    PostId,
    UserId,
)

from .base import Service
from .event_publisher import InteractionEventPublisher
from .post_service import PostService

# Maximum interactions returned for a post
INTERACTIONS_PAGE_SIZE = 50


class InteractionService(Service):
    """Domain service for likes and comments.

    Writes go to the store first (interaction row, then counter), the
    transaction is committed, and only then is the event published. The
    two steps are not atomic: a publish failure surfaces to the caller but
    the stored interaction stays.
    """

    def __init__(
        self,
        interaction_repository: InteractionRepository,
        post_service: PostService,
        event_publisher: InteractionEventPublisher,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize interaction service.

        Args:
            interaction_repository: Interaction repository
            post_service: Post domain service
            event_publisher: Publisher for interaction events
            unit_of_work: Transaction boundary of the current request
        """
        self.interaction_repository = interaction_repository
        self.post_service = post_service
        self.event_publisher = event_publisher
        self.unit_of_work = unit_of_work

    async def like_post(self, post_id: PostId, user_id: UserId) -> Interaction:
        """Like a post.

        Args:
            post_id: Post ID
            user_id: Acting user ID

        Returns:
            Created like interaction

        Raises:
            NotFoundError: If the post does not exist
            ConflictError: If the user already liked the post
            EventPublishError: If the event could not be published
        """
        with logfire.span("like_post", post_id=str(post_id), user_id=str(user_id)):
            post = await self.post_service.get_post_by_id(post_id)
            if not post:
                logfire.warn(
                    "Like on non-existent post",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotFoundError("Post", str(post_id))

            existing = await self.interaction_repository.find_by_user_post_and_type(
                user_id, post_id, InteractionType.LIKE
            )
            if existing:
                logfire.warn(
                    "Duplicate like attempt", user_id=str(user_id), post_id=str(post_id)
                )
                raise ConflictError("User has already liked this post")

            interaction = Interaction(
                id=InteractionId(uuid4()),
                user_id=user_id,
                post_id=post_id,
                type=InteractionType.LIKE,
                created_at=datetime.now(),
            )
            saved = await self._save(interaction, "User has already liked this post")
            logfire.info("Like created", interaction_id=str(saved.id))

            await self.post_service.increment_counter(post_id, CounterField.LIKES)
            await self.unit_of_work.commit()

            await self.event_publisher.publish(
                InteractionEvent(
                    id=saved.id,
                    owner_id=post.author_id,
                    actor_id=user_id,
                    post_id=post_id,
                    type=InteractionType.LIKE,
                    created_at=saved.created_at,
                )
            )

            logfire.info(
                "Like completed", post_id=str(post_id), user_id=str(user_id)
            )
            return saved

    async def unlike_post(self, post_id: PostId, user_id: UserId) -> None:
        """Remove a like from a post.

        No event is published for unlikes.

        Args:
            post_id: Post ID
            user_id: Acting user ID

        Raises:
            NotFoundError: If the user has not liked the post
        """
        with logfire.span("unlike_post", post_id=str(post_id), user_id=str(user_id)):
            interaction = await self.interaction_repository.find_by_user_post_and_type(
                user_id, post_id, InteractionType.LIKE
            )
            if not interaction:
                logfire.warn(
                    "Like not found", user_id=str(user_id), post_id=str(post_id)
                )
                raise NotFoundError("Like", f"{user_id}:{post_id}")

            await self.interaction_repository.delete(interaction.id)
            await self.post_service.decrement_counter(post_id, CounterField.LIKES)

            logfire.info(
                "Unlike completed", post_id=str(post_id), user_id=str(user_id)
            )

    async def comment_on_post(
        self, post_id: PostId, user_id: UserId, content: Optional[str]
    ) -> Interaction:
        """Comment on a post.

        Args:
            post_id: Post ID
            user_id: Acting user ID
            content: Comment text, stored trimmed

        Returns:
            Created comment interaction

        Raises:
            ValidationError: If the content is empty or whitespace
            NotFoundError: If the post does not exist
            ConflictError: If the user already commented on the post
            EventPublishError: If the event could not be published
        """
        with logfire.span(
            "comment_on_post", post_id=str(post_id), user_id=str(user_id)
        ):
            if not content or not content.strip():
                logfire.warn(
                    "Empty comment content",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise ValidationError("Comment content is required")

            post = await self.post_service.get_post_by_id(post_id)
            if not post:
                logfire.warn(
                    "Comment on non-existent post",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotFoundError("Post", str(post_id))

            interaction = Interaction(
                id=InteractionId(uuid4()),
                user_id=user_id,
                post_id=post_id,
                type=InteractionType.COMMENT,
                content=content.strip(),
                created_at=datetime.now(),
            )
            saved = await self._save(
                interaction, "User has already commented on this post"
            )
            logfire.info(
                "Comment created",
                interaction_id=str(saved.id),
                content_length=len(content),
            )

            await self.post_service.increment_counter(post_id, CounterField.COMMENTS)
            await self.unit_of_work.commit()

            await self.event_publisher.publish(
                InteractionEvent(
                    id=saved.id,
                    owner_id=post.author_id,
                    actor_id=user_id,
                    post_id=post_id,
                    type=InteractionType.COMMENT,
                    content=saved.content,
                    created_at=saved.created_at,
                )
            )

            logfire.info(
                "Comment completed", post_id=str(post_id), user_id=str(user_id)
            )
            return saved

    async def get_post_interactions(
        self, post_id: PostId, interaction_type: Optional[InteractionType] = None
    ) -> List[Interaction]:
        """List the newest interactions on a post.

        Args:
            post_id: Post ID
            interaction_type: Optional like/comment filter

        Returns:
            Up to 50 interactions, newest first
        """
        with logfire.span(
            "get_post_interactions",
            post_id=str(post_id),
            type=interaction_type.value if interaction_type else "all",
        ):
            interactions = await self.interaction_repository.find_by_post(
                post_id, interaction_type, limit=INTERACTIONS_PAGE_SIZE
            )
            logfire.debug(
                "Interactions found", post_id=str(post_id), count=len(interactions)
            )
            return interactions

    async def _save(self, interaction: Interaction, conflict_message: str) -> Interaction:
        """Save an interaction, mapping unique constraint violations."""
        try:
            return await self.interaction_repository.save(interaction)
        except IntegrityError:
            logfire.warn(
                "Duplicate interaction",
                user_id=str(interaction.user_id),
                post_id=str(interaction.post_id),
                type=interaction.type.value,
            )
            raise ConflictError(conflict_message)
