"""
JobSeeker model - the candidate profile of a JobSeeker user.
"""
import uuid
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hirehub.core.database import Base
from hirehub.models.base import UUIDMixin

if TYPE_CHECKING:
    from hirehub.models.application import Application
    from hirehub.models.resume import Resume
    from hirehub.models.user import User


class JobSeeker(Base, UUIDMixin):
    __tablename__ = "job_seekers"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    education_details: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    skills: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    college: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    work_status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    experience: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="job_seeker")
    resumes: Mapped[List["Resume"]] = relationship(
        "Resume",
        back_populates="job_seeker",
        passive_deletes=True,
    )
    applications: Mapped[List["Application"]] = relationship(
        "Application",
        back_populates="job_seeker",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<JobSeeker {self.id}>"
