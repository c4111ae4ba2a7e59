"""
Auth Service

Account creation, credential checks, Google sign-in and password reset.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx
from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.http_client import get_http_client
from app.core.security import hash_password, is_institutional_email, verify_password
from app.models.enums import OTPPurpose, UserRole
from app.models.user import User
from app.schemas.user import UserCreate
from app.services import otp_service


logger = logging.getLogger(__name__)

GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v3/userinfo"
GOOGLE_TOKENINFO_URL = "https://oauth2.googleapis.com/tokeninfo"


@dataclass
class GoogleProfile:
    google_id: str
    email: str
    full_name: str


def ensure_institutional(email: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> None:
    """
    Raises:
        HTTPException: If the email is outside the institutional domains.
    """
    if not is_institutional_email(email):
        raise HTTPException(
            status_code=status_code,
            detail="Usa tu correo institucional (@uabc.edu.mx o @uabc.mx)",
        )


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email.lower()))
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, data: UserCreate) -> User:
    """
    Create an email/password account with the guest role.

    Raises:
        HTTPException: 400 for a foreign domain or an existing email.
    """
    ensure_institutional(data.email)

    if await get_user_by_email(db, data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="El correo ya está registrado",
        )

    user = User(
        email=data.email.lower(),
        password_hash=hash_password(data.password),
        full_name=data.full_name.strip(),
        role=UserRole.GUEST,
        is_active=True,
        auth_provider="email",
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)

    logger.info("User %s registered", user.id)
    return user


async def authenticate(db: AsyncSession, email: str, password: str) -> User:
    """
    Check credentials.

    Raises:
        HTTPException: 401 on bad credentials, 403 for a deactivated account.
    """
    user = await get_user_by_email(db, email)

    if not user or not verify_password(password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Correo o contraseña incorrectos",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="La cuenta está desactivada",
        )

    return user


async def fetch_google_profile(token: str) -> GoogleProfile:
    """
    Resolve a Google token into a profile.

    The token is tried first as an access token against the userinfo
    endpoint, then as an ID token against tokeninfo.

    Raises:
        HTTPException: 400 for an invalid token or a profile without email,
            502 if Google cannot be reached.
    """
    client = get_http_client()
    try:
        response = await client.get(
            GOOGLE_USERINFO_URL,
            headers={"Authorization": f"Bearer {token}"},
        )
        if response.status_code != 200:
            response = await client.get(
                GOOGLE_TOKENINFO_URL,
                params={"id_token": token},
            )
    except httpx.RequestError as e:
        logger.error("Google token verification failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="No se pudo verificar el token de Google",
        ) from e

    if response.status_code != 200:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Token de Google inválido",
        )

    data = response.json()
    email = data.get("email")
    if not email or not data.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="La cuenta de Google no tiene correo",
        )

    return GoogleProfile(
        google_id=data["sub"],
        email=email.lower(),
        full_name=data.get("name") or email.split("@")[0],
    )


async def sign_in_with_google(db: AsyncSession, profile: GoogleProfile) -> User:
    """
    Find, link or create the account for a Google profile.

    Raises:
        HTTPException: 403 for a non-institutional Google account or a
            deactivated portal account.
    """
    ensure_institutional(profile.email, status.HTTP_403_FORBIDDEN)

    result = await db.execute(select(User).where(User.google_id == profile.google_id))
    user = result.scalar_one_or_none()

    if not user:
        user = await get_user_by_email(db, profile.email)
        if user:
            user.google_id = profile.google_id
            await db.commit()
            logger.info("Linked Google account to user %s", user.id)
        else:
            user = User(
                email=profile.email,
                password_hash="",
                full_name=profile.full_name,
                role=UserRole.GUEST,
                is_active=True,
                google_id=profile.google_id,
                auth_provider="google",
            )
            db.add(user)
            await db.commit()
            await db.refresh(user)
            logger.info("User %s created from Google sign-in", user.id)

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="La cuenta está desactivada",
        )

    return user


async def reset_password(
    db: AsyncSession,
    email: str,
    code: str,
    new_password: str,
) -> None:
    """
    Raises:
        HTTPException: 400 for an invalid or expired code.
    """
    user = await get_user_by_email(db, email)
    if not user or not await otp_service.verify_otp(
        db, email, code, OTPPurpose.PASSWORD_RESET
    ):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Código inválido o vencido",
        )

    user.password_hash = hash_password(new_password)
    await db.commit()
    logger.info("Password reset for user %s", user.id)
