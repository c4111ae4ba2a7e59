"""
OTP Code Model

Stores one-time codes used for password reset.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Enum, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.enums import OTPPurpose, enum_values


class OTPCode(Base):
    """
    One-time code issued to an email address.

    Attributes:
        id: UUID primary key.
        email: Address the code was sent to.
        code_hash: SHA-256 of the 6-digit code.
        purpose: What the code unlocks.
        expires_at: Expiry timestamp.
        used_at: When the code was consumed.
        is_used: Consumed flag; also set when a newer code supersedes it.
    """

    __tablename__ = "otp_codes"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    code_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    purpose: Mapped[OTPPurpose] = mapped_column(
        Enum(
            OTPPurpose,
            name="otp_purpose",
            create_constraint=True,
            values_callable=enum_values,
        ),
        nullable=False,
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    used_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    is_used: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<OTPCode(id={self.id}, email={self.email}, purpose={self.purpose})>"
