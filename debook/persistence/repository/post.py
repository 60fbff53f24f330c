"""PostgreSQL implementation of Post repository."""

from typing import Optional

import logfire
from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from debook.domain.model import Post
from debook.domain.repository import PostRepository
from debook.domain.value import CounterField, PostId
from debook.persistence.mappers import post_to_dict, row_to_post
from debook.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a post exists."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.id == post_id)
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def save(self, post: Post) -> Post:
        """Save a post (create)."""
        stmt = insert(posts_table).values(**post_to_dict(post))
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def increment_counter(self, post_id: PostId, field: CounterField) -> None:
        """Atomically increment a counter by 1."""
        column = posts_table.c[field.value]
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values({column: column + 1, posts_table.c.updated_at: func.now()})
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_counter(self, post_id: PostId, field: CounterField) -> None:
        """Atomically decrement a counter by 1 (minimum 0)."""
        column = posts_table.c[field.value]
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .where(column > 0)  # Counters never go negative
            .values({column: column - 1, posts_table.c.updated_at: func.now()})
        )
        await self.session.execute(stmt)
        await self.session.flush()
