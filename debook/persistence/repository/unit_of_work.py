"""SQLAlchemy session backed unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from debook.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits the request-scoped session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        """Commit pending changes."""
        await self.session.commit()
        logfire.debug("Session committed early")
