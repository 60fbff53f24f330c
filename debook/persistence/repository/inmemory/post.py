"""In-memory post repository for testing."""

from typing import Optional

from debook.domain.model.post import Post
from debook.domain.repository.post import PostRepository
from debook.domain.value import CounterField, PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        return post_id in self._posts

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post

    async def increment_counter(self, post_id: PostId, field: CounterField) -> None:
        """Increment a counter by 1."""
        post = self._posts.get(post_id)
        if post:
            current = getattr(post, field.value)
            self._posts[post_id] = post.model_copy(update={field.value: current + 1})

    async def decrement_counter(self, post_id: PostId, field: CounterField) -> None:
        """Decrement a counter by 1 (minimum 0)."""
        post = self._posts.get(post_id)
        if post:
            current = getattr(post, field.value)
            if current > 0:
                self._posts[post_id] = post.model_copy(
                    update={field.value: current - 1}
                )
