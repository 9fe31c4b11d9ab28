"""
Notification model - an in-app message, optionally mirrored by email.
"""
import uuid
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hirehub.core.database import Base
from hirehub.models.base import CreatedAtMixin, IntIdMixin

if TYPE_CHECKING:
    from hirehub.models.user import User


class Notification(Base, IntIdMixin, CreatedAtMixin):
    """
    ``email_requested`` records that the creator asked for email delivery;
    rows with it set and ``sent_email`` still false are retried by the
    background sweep. ``email_body`` keeps the rendered HTML of templated
    emails so a retry sends the same message.
    """

    __tablename__ = "notifications"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    message: Mapped[str] = mapped_column(String(300), nullable=False)
    subject: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    email_requested: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    sent_email: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    email_body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="notifications")

    def __repr__(self) -> str:
        return f"<Notification {self.id} user={self.user_id}>"
