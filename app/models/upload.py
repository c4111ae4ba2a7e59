"""
Upload Model

General-purpose file uploads kept alongside certificates.
"""

import uuid
from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.models.enums import SemesterTerm, UploadCategory, enum_values

if TYPE_CHECKING:
    from app.models.user import User


class Upload(Base):
    """
    A file uploaded by a user, stored inline as a data URL.

    Attributes:
        id: UUID primary key.
        user_id: Owning user.
        name: Original file name.
        title: Optional human title.
        category: GENERAL or CERTIFICATE.
        semester_term: Optional academic period.
        issued_on: Optional issue date.
        content_type, size, data: Inline file payload.
    """

    __tablename__ = "uploads"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    category: Mapped[UploadCategory] = mapped_column(
        Enum(
            UploadCategory,
            name="upload_category",
            create_constraint=True,
            values_callable=enum_values,
        ),
        default=UploadCategory.GENERAL,
        nullable=False,
    )
    semester_term: Mapped[Optional[SemesterTerm]] = mapped_column(
        Enum(
            SemesterTerm,
            name="semester_term",
            create_constraint=True,
            values_callable=enum_values,
        ),
        nullable=True,
    )
    issued_on: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    content_type: Mapped[str] = mapped_column(String(100), nullable=False)
    size: Mapped[int] = mapped_column(Integer, nullable=False)
    data: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="uploads",
    )

    def __repr__(self) -> str:
        return f"<Upload(id={self.id}, name={self.name!r})>"
