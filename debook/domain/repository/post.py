"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from debook.domain.model.post import Post
from debook.domain.value import CounterField, PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists.

        Args:
            post_id: The post's unique identifier

        Returns:
            True if a post with this ID exists
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def increment_counter(self, post_id: PostId, field: CounterField) -> None:
        """Atomically increment a counter by 1.

        Uses SQL-level increment to avoid race conditions.

        Args:
            post_id: The post ID
            field: Counter to increment
        """
        pass

    @abstractmethod
    async def decrement_counter(self, post_id: PostId, field: CounterField) -> None:
        """Atomically decrement a counter by 1 (minimum 0).

        Args:
            post_id: The post ID
            field: Counter to decrement
        """
        pass
