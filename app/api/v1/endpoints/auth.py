"""
Authentication Routes

Handles signup, login, Google sign-in and password reset endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from app.api.deps import DbSession
from app.core.config import settings
from app.core.security import create_access_token
from app.middleware.rate_limit import auth_limiter
from app.models.enums import OTPPurpose
from app.schemas.auth import (
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    GoogleAuthRequest,
    MessageResponse,
    ResetPasswordRequest,
    Token,
)
from app.schemas.user import UserCreate
from app.services import auth_service, email_service, otp_service


logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    dependencies=[Depends(auth_limiter)],
)


@router.post(
    "/signup",
    response_model=Token,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new account",
)
async def signup(user_data: UserCreate, db: DbSession) -> Token:
    """
    Register with an institutional email and return a JWT.

    New accounts start with the guest role; an administrator assigns the
    real one later.

    Args:
        user_data: Name, email and password.
        db: Database session.

    Returns:
        Token: JWT access token.

    Raises:
        HTTPException: 400 for a foreign domain or an existing email.
        HTTPException: 429 if rate limited.
    """
    user = await auth_service.register_user(db, user_data)
    return Token(access_token=create_access_token(subject=user.id))


@router.post(
    "/login",
    response_model=Token,
    summary="Login and get access token",
)
async def login(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    db: DbSession,
) -> Token:
    """
    Authenticate with email and password.

    Note: Uses OAuth2PasswordRequestForm for compatibility with
    Swagger UI's built-in authorization feature; ``username`` holds the email.

    Raises:
        HTTPException: 401 if credentials are invalid.
        HTTPException: 403 if the account is deactivated.
    """
    user = await auth_service.authenticate(db, form_data.username, form_data.password)
    return Token(access_token=create_access_token(subject=user.id))


@router.post(
    "/google",
    response_model=Token,
    summary="Authenticate with Google",
)
async def google_auth(data: GoogleAuthRequest, db: DbSession) -> Token:
    """
    Sign in with a Google access or ID token.

    The Google account must use an institutional email. Existing accounts
    with the same email are linked.

    Raises:
        HTTPException: 400 if the Google token is invalid.
        HTTPException: 403 for a non-institutional email or inactive account.
        HTTPException: 502 if Google cannot be reached.
    """
    profile = await auth_service.fetch_google_profile(data.id_token)
    user = await auth_service.sign_in_with_google(db, profile)
    return Token(access_token=create_access_token(subject=user.id))


@router.post(
    "/forgot-password",
    response_model=ForgotPasswordResponse,
    summary="Request a password reset code",
)
async def forgot_password(data: ForgotPasswordRequest, db: DbSession) -> ForgotPasswordResponse:
    """
    Email a 6-digit reset code.

    The response is identical whether or not the email exists.

    Raises:
        HTTPException: 400 for Google-only accounts.
        HTTPException: 429 during the resend cooldown.
        HTTPException: 500 if the email could not be sent.
    """
    email = data.email.lower()
    generic = ForgotPasswordResponse(
        message="Si existe una cuenta con este correo, recibirás un código.",
        email=email,
        cooldown_seconds=settings.OTP_RESEND_COOLDOWN_SECONDS,
    )

    user = await auth_service.get_user_by_email(db, email)
    if not user:
        return generic

    if not user.password_hash:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Esta cuenta usa Google. Inicia sesión con Google.",
        )

    can_send, remaining = await otp_service.can_resend_otp(
        db, email, OTPPurpose.PASSWORD_RESET
    )
    if not can_send:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Espera {remaining} segundos antes de pedir otro código",
            headers={"Retry-After": str(remaining)},
        )

    otp_code = await otp_service.create_otp(db, email, OTPPurpose.PASSWORD_RESET)
    email_sent = await email_service.send_password_reset_email(
        to_email=email,
        otp_code=otp_code,
        full_name=user.full_name,
    )
    if not email_sent:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="No se pudo enviar el correo. Intenta más tarde.",
        )

    return generic


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    summary="Reset password with a code",
)
async def reset_password(data: ResetPasswordRequest, db: DbSession) -> MessageResponse:
    """
    Set a new password using the emailed code.

    Raises:
        HTTPException: 400 if the code is invalid or expired.
    """
    await auth_service.reset_password(db, data.email, data.otp, data.new_password)
    return MessageResponse(message="Contraseña actualizada. Ya puedes iniciar sesión.")
