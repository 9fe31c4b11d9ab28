"""
Employer model - the company profile of an Employer user.
"""
import uuid
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hirehub.core.database import Base
from hirehub.models.base import UUIDMixin

if TYPE_CHECKING:
    from hirehub.models.job import Job
    from hirehub.models.user import User


class Employer(Base, UUIDMixin):
    __tablename__ = "employers"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    company_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    position: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    contact_info: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="employer")
    jobs: Mapped[List["Job"]] = relationship(
        "Job",
        back_populates="employer",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Employer {self.company_name}>"
