"""
User model - an account of any role.
"""
from datetime import date, datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, Date, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hirehub.core.database import Base
from hirehub.models.base import CreatedAtMixin, UUIDMixin

if TYPE_CHECKING:
    from hirehub.models.employer import Employer
    from hirehub.models.job_seeker import JobSeeker
    from hirehub.models.notification import Notification

ROLE_EMPLOYER = "Employer"
ROLE_JOB_SEEKER = "JobSeeker"
ROLE_ADMIN = "Admin"
ROLES = (ROLE_EMPLOYER, ROLE_JOB_SEEKER, ROLE_ADMIN)


class User(Base, UUIDMixin, CreatedAtMixin):
    """
    User entity.

    The role decides which profile row (employer or job seeker) the user may
    own; that pairing is enforced by the services, not by the schema.
    """

    __tablename__ = "users"

    full_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    date_of_birth: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(250), nullable=True)

    # Account lifecycle
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    deactivated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    scheduled_deletion_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        index=True,
    )

    # Relationships
    employer: Mapped[Optional["Employer"]] = relationship(
        "Employer",
        back_populates="user",
        uselist=False,
        passive_deletes=True,
    )
    job_seeker: Mapped[Optional["JobSeeker"]] = relationship(
        "JobSeeker",
        back_populates="user",
        uselist=False,
        passive_deletes=True,
    )
    notifications: Mapped[List["Notification"]] = relationship(
        "Notification",
        back_populates="user",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role})>"
