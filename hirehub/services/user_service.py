"""
User service - profile management and the account lifecycle.

Deactivation is reversible and keeps every row. A scheduled deletion is a
deactivation plus a due date; the periodic purge task removes accounts
whose date has passed. Permanent deletion cascades to profiles,
notifications and reset tokens at the database level.
"""
from datetime import datetime, timedelta, timezone
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.core.config import settings
from hirehub.core.exceptions import RoleChangeBlockedException, UserNotFoundException
from hirehub.core.logging import get_logger
from hirehub.models.user import ROLE_EMPLOYER, ROLE_JOB_SEEKER, User
from hirehub.repositories.employer_repository import EmployerRepository
from hirehub.repositories.job_seeker_repository import JobSeekerRepository
from hirehub.repositories.user_repository import UserRepository
from hirehub.schemas.user import UserResponse, UserUpdate

logger = get_logger(__name__)


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        full_name=user.full_name,
        email=user.email,
        role=user.role,
        date_of_birth=user.date_of_birth,
        gender=user.gender,
        address=user.address,
        is_active=user.is_active,
        deactivated_at=user.deactivated_at,
        scheduled_deletion_at=user.scheduled_deletion_at,
        created_at=user.created_at,
    )


class UserService:
    """Handles user profile and account lifecycle logic."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.employer_repo = EmployerRepository()
        self.job_seeker_repo = JobSeekerRepository()

    async def get_all(self, db: AsyncSession) -> List[UserResponse]:
        users = await self.user_repo.get_all(db, order_by=User.created_at)
        return [to_user_response(u) for u in users]

    async def get_by_id(self, db: AsyncSession, user_id: UUID) -> UserResponse:
        user = await self.user_repo.get_by_id(db, user_id)
        if not user:
            raise UserNotFoundException(user_id)
        return to_user_response(user)

    async def get_by_role(self, db: AsyncSession, role: str) -> List[UserResponse]:
        return [to_user_response(u) for u in await self.user_repo.get_by_role(db, role)]

    async def search_by_name(self, db: AsyncSession, name: str) -> List[UserResponse]:
        return [to_user_response(u) for u in await self.user_repo.search_by_name(db, name)]

    async def update(
        self,
        db: AsyncSession,
        user_id: UUID,
        data: UserUpdate,
    ) -> UserResponse:
        """
        Full replace of the mutable profile fields.

        Raises:
            UserNotFoundException: If the user does not exist.
            RoleChangeBlockedException: If the role changes while a profile
                of the current role still exists.
        """
        user = await self.user_repo.get_by_id(db, user_id)
        if not user:
            raise UserNotFoundException(user_id)
        if data.role != user.role:
            await self._ensure_no_profile(db, user)

        user = await self.user_repo.update(
            db,
            user,
            full_name=data.full_name,
            role=data.role,
            date_of_birth=data.date_of_birth,
            gender=data.gender,
            address=data.address,
        )
        await db.commit()
        return to_user_response(user)

    async def delete(self, db: AsyncSession, user_id: UUID) -> None:
        deleted = await self.user_repo.delete(db, user_id)
        if not deleted:
            raise UserNotFoundException(user_id)
        await db.commit()
        logger.info("user_deleted", user_id=str(user_id))

    async def count(self, db: AsyncSession) -> int:
        return await self.user_repo.count(db)

    async def _ensure_no_profile(self, db: AsyncSession, user: User) -> None:
        if user.role == ROLE_EMPLOYER and await self.employer_repo.get_by_user_id(db, user.id):
            raise RoleChangeBlockedException(ROLE_EMPLOYER)
        if user.role == ROLE_JOB_SEEKER and await self.job_seeker_repo.get_by_user_id(db, user.id):
            raise RoleChangeBlockedException(ROLE_JOB_SEEKER)

    # ── Account lifecycle ────────────────────────────────────────────────────

    async def deactivate(self, db: AsyncSession, user_id: UUID) -> bool:
        """False when the user is missing or already inactive."""
        user = await self.user_repo.get_by_id(db, user_id)
        if not user or not user.is_active:
            return False

        user.is_active = False
        user.deactivated_at = datetime.now(timezone.utc)
        await db.commit()
        logger.info("user_deactivated", user_id=str(user_id))
        return True

    async def reactivate(self, db: AsyncSession, user_id: UUID) -> bool:
        """False when the user is missing or already active. Cancels any scheduled deletion."""
        user = await self.user_repo.get_by_id(db, user_id)
        if not user or user.is_active:
            return False

        user.is_active = True
        user.deactivated_at = None
        user.scheduled_deletion_at = None
        await db.commit()
        logger.info("user_reactivated", user_id=str(user_id))
        return True

    async def schedule_deletion(
        self,
        db: AsyncSession,
        user_id: UUID,
        days: int,
    ) -> datetime:
        """
        Deactivate now and mark the account for permanent deletion in
        ``days`` days. Non-positive values fall back to the grace period.

        Returns the date the deletion becomes due.
        """
        if days <= 0:
            days = settings.account_deletion_grace_days

        user = await self.user_repo.get_by_id(db, user_id)
        if not user:
            raise UserNotFoundException(user_id)

        now = datetime.now(timezone.utc)
        due = now + timedelta(days=days)
        if user.is_active:
            user.is_active = False
            user.deactivated_at = now
        user.scheduled_deletion_at = due
        await db.commit()

        logger.info("user_deletion_scheduled", user_id=str(user_id), due=due.isoformat())
        return due

    async def delete_permanently(self, db: AsyncSession, user_id: UUID) -> bool:
        deleted = await self.user_repo.delete(db, user_id)
        if deleted:
            await db.commit()
            logger.info("user_deleted_permanently", user_id=str(user_id))
        return deleted

    async def purge_scheduled_deletions(self, db: AsyncSession) -> int:
        """Delete every account whose scheduled deletion is due. Returns how many."""
        due_users = await self.user_repo.get_due_for_deletion(db, datetime.now(timezone.utc))
        purged = 0
        for user in due_users:
            if await self.user_repo.delete(db, user.id):
                purged += 1
        await db.commit()

        if purged:
            logger.info("scheduled_deletions_purged", count=purged)
        return purged
