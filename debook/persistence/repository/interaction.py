"""PostgreSQL implementation of Interaction repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from debook.domain.model import Interaction
from debook.domain.repository import InteractionRepository
from debook.domain.value import InteractionId, InteractionType, PostId, UserId
from debook.persistence.mappers import interaction_to_dict, row_to_interaction
from debook.persistence.tables import interactions_table


class PostgresInteractionRepository(InteractionRepository):
    """PostgreSQL implementation of InteractionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_post_and_type(
        self,
        user_id: UserId,
        post_id: PostId,
        interaction_type: InteractionType,
    ) -> Optional[Interaction]:
        """Find a user's interaction of a given type on a post."""
        stmt = select(interactions_table).where(
            and_(
                interactions_table.c.user_id == user_id,
                interactions_table.c.post_id == post_id,
                interactions_table.c.type == interaction_type.value,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_interaction(row._asdict()) if row else None

    async def find_by_post(
        self,
        post_id: PostId,
        interaction_type: Optional[InteractionType] = None,
        limit: int = 50,
    ) -> List[Interaction]:
        """Find interactions on a post, newest first."""
        stmt = select(interactions_table).where(interactions_table.c.post_id == post_id)
        if interaction_type is not None:
            stmt = stmt.where(interactions_table.c.type == interaction_type.value)
        stmt = stmt.order_by(interactions_table.c.created_at.desc()).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_interaction(row._asdict()) for row in result.fetchall()]

    async def save(self, interaction: Interaction) -> Interaction:
        """Save an interaction (create)."""
        stmt = insert(interactions_table).values(**interaction_to_dict(interaction))
        await self.session.execute(stmt)
        await self.session.flush()
        return interaction

    async def delete(self, interaction_id: InteractionId) -> None:
        """Delete an interaction."""
        stmt = delete(interactions_table).where(
            interactions_table.c.id == interaction_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
