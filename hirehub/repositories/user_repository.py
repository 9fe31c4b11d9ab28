"""
User repository - data access for User entity.
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.models.user import User
from hirehub.repositories.base import BaseRepository


def _email_matches(email: str):
    return func.lower(User.email) == email.strip().lower()


class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User)

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> Optional[User]:
        """Find a user by email address, ignoring case."""
        result = await db.execute(self._select().where(_email_matches(email)))
        return result.scalar_one_or_none()

    async def email_exists(
        self,
        db: AsyncSession,
        email: str,
    ) -> bool:
        """Check if an email is already registered, ignoring case."""
        result = await db.execute(
            select(User.id).where(_email_matches(email))
        )
        return result.scalar_one_or_none() is not None

    async def get_by_role(self, db: AsyncSession, role: str) -> List[User]:
        return await self._all(db, self._select().where(User.role == role).order_by(User.full_name))

    async def search_by_name(self, db: AsyncSession, name: str) -> List[User]:
        query = self._select().where(User.full_name.contains(name, autoescape=True))
        return await self._all(db, query.order_by(User.full_name))

    async def get_due_for_deletion(
        self,
        db: AsyncSession,
        now: datetime,
    ) -> List[User]:
        """Inactive users whose scheduled deletion date has passed."""
        query = self._select().where(
            User.is_active == False,
            User.scheduled_deletion_at.isnot(None),
            User.scheduled_deletion_at <= now,
        )
        return await self._all(db, query)
