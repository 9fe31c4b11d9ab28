"""
PasswordReset repository - data access for reset tokens.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.models.password_reset import PasswordReset
from hirehub.repositories.base import BaseRepository


class PasswordResetRepository(BaseRepository[PasswordReset]):
    def __init__(self):
        super().__init__(PasswordReset)

    async def get_usable_by_token_hash(
        self,
        db: AsyncSession,
        token_hash: str,
        now: datetime,
    ) -> Optional[PasswordReset]:
        """Unused record with this hash that has not expired yet."""
        query = self._select().where(
            PasswordReset.token_hash == token_hash,
            PasswordReset.used == False,
            PasswordReset.expires_at > now,
        )
        result = await db.execute(query)
        return result.scalars().first()

    async def mark_used(self, db: AsyncSession, reset: PasswordReset) -> None:
        reset.used = True
        await db.flush()
