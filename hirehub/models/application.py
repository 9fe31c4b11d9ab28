"""
Application model - a job seeker applying to a job with one resume.
"""
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hirehub.core.database import Base
from hirehub.models.base import IntIdMixin, utcnow

if TYPE_CHECKING:
    from hirehub.models.job import Job
    from hirehub.models.job_seeker import JobSeeker
    from hirehub.models.resume import Resume

APPLICATION_STATUS_APPLIED = "Applied"
APPLICATION_STATUS_SHORTLISTED = "Shortlisted"
APPLICATION_STATUS_INTERVIEW = "Interview"
APPLICATION_STATUS_REJECTED = "Rejected"


class Application(Base, IntIdMixin):
    """
    Job application.

    ``status`` conventionally moves Applied -> Shortlisted/Reviewed ->
    Interview -> Accepted/Rejected, but any string is accepted.
    """

    __tablename__ = "applications"

    job_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    job_seeker_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("job_seekers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # No cascade: a resume in use cannot be deleted
    resume_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("resumes.id"),
        nullable=False,
        index=True,
    )

    cover_letter: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(50), default=APPLICATION_STATUS_APPLIED, nullable=False)
    applied_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Review
    notes: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    reviewed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    is_shortlisted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    interview_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    employer_feedback: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)

    job: Mapped["Job"] = relationship("Job", back_populates="applications")
    job_seeker: Mapped["JobSeeker"] = relationship("JobSeeker", back_populates="applications")
    resume: Mapped["Resume"] = relationship("Resume", back_populates="applications")

    def __repr__(self) -> str:
        return f"<Application {self.id} job={self.job_id} status={self.status}>"
