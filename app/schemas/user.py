"""
User Schemas

Pydantic models for user request/response validation.
"""

import re
import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.models.enums import UserRole


PHONE_RE = re.compile(r"^(\+?52)?\s?\d{10}$")


def normalize_phone(value: str) -> str:
    """Strip spaces and dashes, then check for a Mexican 10-digit number."""
    cleaned = re.sub(r"[\s-]", "", value)
    if not PHONE_RE.match(cleaned):
        raise ValueError("Teléfono inválido: usa 10 dígitos, opcionalmente con +52")
    return cleaned


class UserCreate(BaseModel):
    """Schema for registering with email and password."""

    email: EmailStr = Field(..., description="Institutional email address")
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    full_name: str = Field(..., min_length=2, max_length=255, description="User's full name")


class UserResponse(BaseModel):
    """Schema for user response (excludes password)."""

    id: uuid.UUID
    email: str
    full_name: str
    role: UserRole
    is_active: bool
    phone: Optional[str] = None
    bio: Optional[str] = None
    avatar_b64: Optional[str] = None
    auth_provider: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ProfileUpdate(BaseModel):
    """
    Schema for the self-service profile form.

    Role and active flag are deliberately absent: only administrators
    change them.
    """

    full_name: Optional[str] = Field(None, max_length=255, description="New display name")
    phone: Optional[str] = Field(None, max_length=20, description="Mexican phone number")
    bio: Optional[str] = Field(None, max_length=1000, description="Short biography")

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if len(value) < 2:
            raise ValueError("El nombre debe tener al menos 2 caracteres")
        return value

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return normalize_phone(value)

    @field_validator("bio")
    @classmethod
    def strip_bio(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return value.strip() or None
