"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from debook.domain.model import Notification
from debook.domain.repository import NotificationRepository
from debook.domain.value import NotificationId, NotificationStatus, UserId
from debook.persistence.mappers import notification_to_dict, row_to_notification
from debook.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id_and_user(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Optional[Notification]:
        """Find a notification by ID for its recipient."""
        stmt = select(notifications_table).where(
            and_(
                notifications_table.c.id == notification_id,
                notifications_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_user(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(notifications_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_by_user_and_status(
        self, user_id: UserId, status: NotificationStatus
    ) -> int:
        """Count a user's notifications in a given status."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                and_(
                    notifications_table.c.user_id == user_id,
                    notifications_table.c.status == status.value,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, notification: Notification) -> Notification:
        """Save a notification (upsert on ID)."""
        values = notification_to_dict(notification)
        stmt = insert(notifications_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[notifications_table.c.id],
            set_={"status": values["status"], "message": values["message"]},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return notification
