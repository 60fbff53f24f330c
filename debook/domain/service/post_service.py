"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from debook.domain.error import NotFoundError
from debook.domain.model.post import Post
from debook.domain.repository import PostRepository
from debook.domain.value import CounterField, PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, content: str, author_id: UserId) -> Post:
        """Create a post with zeroed counters.

        Args:
            content: Post text
            author_id: Author's user ID

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.create_post",
            author_id=str(author_id),
            content_length=len(content),
        ):
            now = datetime.now()
            post = Post(
                id=PostId(uuid4()),
                content=content,
                author_id=author_id,
                likes_count=0,
                comments_count=0,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created", post_id=str(saved.id), author_id=str(author_id)
            )
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.debug(
                    "Post found", post_id=str(post_id), author_id=str(post.author_id)
                )
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID or fail.

        Args:
            post_id: Post ID

        Returns:
            Post with its counters

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))

        logfire.debug(
            "Post counters",
            post_id=str(post_id),
            likes=post.likes_count,
            comments=post.comments_count,
        )
        return post

    async def post_exists(self, post_id: PostId) -> bool:
        """Check whether a post exists.

        Args:
            post_id: Post ID
        """
        exists = await self.post_repository.exists(post_id)
        logfire.debug("Post existence checked", post_id=str(post_id), exists=exists)
        return exists

    async def increment_counter(self, post_id: PostId, field: CounterField) -> None:
        """Atomically increment a post counter.

        Args:
            post_id: Post ID
            field: Counter to increment
        """
        with logfire.span(
            "post_service.increment_counter", post_id=str(post_id), field=field.value
        ):
            await self.post_repository.increment_counter(post_id, field)
            logfire.info(
                "Post counter incremented", post_id=str(post_id), field=field.value
            )

    async def decrement_counter(self, post_id: PostId, field: CounterField) -> None:
        """Atomically decrement a post counter (minimum 0).

        Args:
            post_id: Post ID
            field: Counter to decrement
        """
        with logfire.span(
            "post_service.decrement_counter", post_id=str(post_id), field=field.value
        ):
            await self.post_repository.decrement_counter(post_id, field)
            logfire.info(
                "Post counter decremented", post_id=str(post_id), field=field.value
            )
