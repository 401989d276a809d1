"""
Notification repository for database operations.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update

from infiniti_cms.db.repositories.base_repository import BaseRepository
from infiniti_cms.models.notification import Notification


class NotificationRepository(BaseRepository[Notification]):
    """Repository for notification operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Notification, session)

    async def list_for_user(self, user_id: UUID, unread_only: bool = False) -> List[Notification]:
        """Notifications addressed to a user, newest first."""
        query = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            query = query.where(Notification.is_read.is_(False))
        query = query.order_by(Notification.created_at.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def mark_read(self, id: UUID) -> Optional[Notification]:
        return await self.update(id, is_read=True)

    async def mark_all_read(self, user_id: UUID) -> None:
        await self.session.execute(
            update(Notification)
            .where(Notification.user_id == user_id, Notification.is_read.is_(False))
            .values(is_read=True)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
