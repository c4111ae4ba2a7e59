"""
Auth Schemas

Request and response bodies of the ``/auth`` routes.
"""

from pydantic import BaseModel, EmailStr, Field


class Token(BaseModel):
    """Bearer token returned by every sign-in route."""

    access_token: str
    token_type: str = "bearer"


class GoogleAuthRequest(BaseModel):
    """Token obtained by the browser from Google Identity Services."""

    id_token: str = Field(..., description="Google access token or ID token")


class ForgotPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")


class ForgotPasswordResponse(BaseModel):
    """
    Same body whether or not the account exists, so the route cannot be
    used to probe for registered addresses.
    """

    message: str
    email: str
    cooldown_seconds: int | None = None


class ResetPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")
    otp: str = Field(..., min_length=6, max_length=6, pattern=r"^\d{6}$", description="Emailed code")
    new_password: str = Field(..., min_length=6, description="At least 6 characters")


class MessageResponse(BaseModel):
    message: str
