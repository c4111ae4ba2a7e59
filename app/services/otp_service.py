"""
OTP Service

Six-digit password reset codes. Only a SHA-256 of each code is stored;
the plain code exists in memory just long enough to be emailed.

A code is accepted once, before ``OTP_EXPIRE_MINUTES`` elapse. Requesting
a new code discards the unused ones, and requests closer together than
``OTP_RESEND_COOLDOWN_SECONDS`` are refused.
"""

import hashlib
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.enums import OTPPurpose
from app.models.otp_code import OTPCode


def generate_otp() -> str:
    return f"{secrets.randbelow(10**6):06d}"


def hash_otp(code: str) -> str:
    return hashlib.sha256(code.encode("utf-8")).hexdigest()


def _now() -> datetime:
    return datetime.now(timezone.utc)


async def create_otp(db: AsyncSession, email: str, purpose: OTPPurpose) -> str:
    """
    Replace any pending code for the address with a fresh one.

    Returns:
        str: The plain code, to be emailed and then forgotten.
    """
    email = email.lower()
    await db.execute(
        delete(OTPCode).where(
            OTPCode.email == email,
            OTPCode.purpose == purpose,
            OTPCode.is_used.is_(False),
        )
    )

    code = generate_otp()
    db.add(
        OTPCode(
            email=email,
            code_hash=hash_otp(code),
            purpose=purpose,
            expires_at=_now() + timedelta(minutes=settings.OTP_EXPIRE_MINUTES),
        )
    )
    await db.commit()
    return code


async def verify_otp(
    db: AsyncSession,
    email: str,
    code: str,
    purpose: OTPPurpose,
) -> bool:
    """Mark the code used and return True if it is pending and unexpired."""
    now = _now()
    result = await db.execute(
        select(OTPCode).where(
            OTPCode.email == email.lower(),
            OTPCode.code_hash == hash_otp(code),
            OTPCode.purpose == purpose,
            OTPCode.is_used.is_(False),
            OTPCode.expires_at > now,
        )
    )
    record = result.scalar_one_or_none()
    if record is None:
        return False

    record.is_used = True
    record.used_at = now
    await db.commit()
    return True


async def can_resend_otp(
    db: AsyncSession,
    email: str,
    purpose: OTPPurpose,
) -> tuple[bool, Optional[int]]:
    """
    Check the resend cooldown for an address.

    Returns:
        tuple: ``(True, None)`` when a code may be sent now, otherwise
        ``(False, seconds_remaining)``.
    """
    cooldown = settings.OTP_RESEND_COOLDOWN_SECONDS
    now = _now()
    result = await db.execute(
        select(OTPCode)
        .where(
            OTPCode.email == email.lower(),
            OTPCode.purpose == purpose,
            OTPCode.created_at > now - timedelta(seconds=cooldown),
        )
        .order_by(OTPCode.created_at.desc())
        .limit(1)
    )
    latest = result.scalar_one_or_none()
    if latest is None:
        return True, None

    remaining = int(cooldown - (now - latest.created_at).total_seconds())
    if remaining <= 0:
        return True, None
    return False, remaining
