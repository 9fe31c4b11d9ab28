"""
Resume model - a CV document owned by a job seeker.
"""
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hirehub.core.database import Base
from hirehub.models.base import IntIdMixin, utcnow

if TYPE_CHECKING:
    from hirehub.models.application import Application
    from hirehub.models.job_seeker import JobSeeker


class Resume(Base, IntIdMixin):
    __tablename__ = "resumes"

    job_seeker_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("job_seekers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    resume_name: Mapped[str] = mapped_column(String(150), nullable=False)
    # Either an external URL/path or an object key under resumes/ in the bucket
    file_path: Mapped[str] = mapped_column(String(300), nullable=False)
    file_type: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    parsed_skills: Mapped[Optional[str]] = mapped_column(String(800), nullable=True)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )

    job_seeker: Mapped["JobSeeker"] = relationship("JobSeeker", back_populates="resumes")
    applications: Mapped[List["Application"]] = relationship("Application", back_populates="resume")

    def __repr__(self) -> str:
        return f"<Resume {self.id}: {self.resume_name}>"
