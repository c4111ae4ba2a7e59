"""
Certificate Model

Academic credential registered by a staff member, with the file inlined
as a base64 data URL.
"""

import uuid
from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.models.enums import (
    CertificateType,
    Department,
    Modality,
    SemesterTerm,
    enum_values,
)

if TYPE_CHECKING:
    from app.models.user import User


class Certificate(Base):
    """
    Certificate model.

    Each certificate belongs to exactly one user. The "other" free-text
    fields are only meaningful when the matching enum is ``OTHER``.

    Attributes:
        id: UUID primary key.
        user_id: Owning user.
        title: Certificate title.
        type / type_other: Category and free-text category for OTHER.
        department / department_other: Department and free-text for OTHER.
        semester_term / year: Academic period.
        description, issuer, modality, hours, issued_on: Optional metadata.
        file_name, content_type, size, data: Inline file payload.
    """

    __tablename__ = "certificates"
    __table_args__ = (
        CheckConstraint("year BETWEEN 2000 AND 2100", name="ck_certificates_year"),
        CheckConstraint("hours IS NULL OR hours > 0", name="ck_certificates_hours"),
    )

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
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    type: Mapped[CertificateType] = mapped_column(
        Enum(
            CertificateType,
            name="certificate_type",
            create_constraint=True,
            values_callable=enum_values,
        ),
        nullable=False,
    )
    type_other: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    department: Mapped[Department] = mapped_column(
        Enum(
            Department,
            name="department",
            create_constraint=True,
            values_callable=enum_values,
        ),
        nullable=False,
    )
    department_other: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    issuer: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    modality: Mapped[Optional[Modality]] = mapped_column(
        Enum(
            Modality,
            name="modality",
            create_constraint=True,
            values_callable=enum_values,
        ),
        nullable=True,
    )
    hours: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )
    semester_term: Mapped[SemesterTerm] = mapped_column(
        Enum(
            SemesterTerm,
            name="semester_term",
            create_constraint=True,
            values_callable=enum_values,
        ),
        nullable=False,
    )
    year: Mapped[int] = mapped_column(
        Integer,
        index=True,
        nullable=False,
    )
    issued_on: Mapped[Optional[date]] = mapped_column(
        Date,
        nullable=True,
    )

    # File payload
    file_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    content_type: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    size: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
    data: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Relationships
    user: Mapped["User"] = relationship(
        "User",
        back_populates="certificates",
    )

    def __repr__(self) -> str:
        return f"<Certificate(id={self.id}, user_id={self.user_id}, title={self.title!r})>"
