"""
Job model - a posting published by an employer.
"""
import uuid
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hirehub.core.database import Base
from hirehub.models.base import CreatedAtMixin, IntIdMixin

if TYPE_CHECKING:
    from hirehub.models.application import Application
    from hirehub.models.employer import Employer

JOB_STATUS_OPEN = "Open"


class Job(Base, IntIdMixin, CreatedAtMixin):
    """
    Job posting.

    ``status`` is free text; "Open" is only the value new postings start with.
    """

    __tablename__ = "jobs"

    employer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("employers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    salary: Mapped[Optional[float]] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=True)

    # Eligibility
    skills_required: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    academic_eligibility: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    allowed_batches: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    backlogs: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    status: Mapped[str] = mapped_column(String(50), default=JOB_STATUS_OPEN, nullable=False)

    employer: Mapped["Employer"] = relationship("Employer", back_populates="jobs")
    applications: Mapped[List["Application"]] = relationship(
        "Application",
        back_populates="job",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Job {self.id}: {self.title}>"
