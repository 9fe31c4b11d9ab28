"""
Notification repository - data access for Notification entity.
"""
from typing import List
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hirehub.models.notification import Notification
from hirehub.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[Notification]):
    def __init__(self):
        super().__init__(Notification)

    def load_options(self) -> list:
        return [selectinload(Notification.user)]

    def _newest_first(self, query):
        return query.order_by(Notification.created_at.desc(), Notification.id.desc())

    async def get_by_user(self, db: AsyncSession, user_id: UUID) -> List[Notification]:
        query = self._select().where(Notification.user_id == user_id)
        return await self._all(db, self._newest_first(query))

    async def get_unread_by_user(self, db: AsyncSession, user_id: UUID) -> List[Notification]:
        query = self._select().where(
            Notification.user_id == user_id,
            Notification.is_read == False,
        )
        return await self._all(db, self._newest_first(query))

    async def get_recent_by_user(
        self,
        db: AsyncSession,
        user_id: UUID,
        limit: int,
    ) -> List[Notification]:
        query = self._select().where(Notification.user_id == user_id)
        return await self._all(db, self._newest_first(query).limit(limit))

    async def mark_all_as_read(self, db: AsyncSession, user_id: UUID) -> int:
        """Flip every unread notification of the user. Returns rows changed."""
        result = await db.execute(
            update(Notification)
            .where(
                Notification.user_id == user_id,
                Notification.is_read == False,
            )
            .values(is_read=True)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    async def get_unsent_emails(self, db: AsyncSession, limit: int) -> List[Notification]:
        """Oldest first: notifications that asked for email but never got one out."""
        query = self._select().where(
            Notification.email_requested == True,
            Notification.sent_email == False,
        )
        query = query.order_by(Notification.created_at, Notification.id).limit(limit)
        return await self._all(db, query)
