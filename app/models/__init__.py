"""
Certificate Portal - Models Module

This module exports all SQLAlchemy models for the application.
Import Base for Alembic migrations.
"""

from app.core.database import Base

# Enums
from app.models.enums import (
    CertificateType,
    Department,
    Modality,
    OTPPurpose,
    SemesterTerm,
    UploadCategory,
    UserRole,
)

# Models
from app.models.user import User
from app.models.certificate import Certificate
from app.models.upload import Upload
from app.models.otp_code import OTPCode

__all__ = [
    # Base
    "Base",
    # Enums
    "CertificateType",
    "Department",
    "Modality",
    "OTPPurpose",
    "SemesterTerm",
    "UploadCategory",
    "UserRole",
    # Models
    "User",
    "Certificate",
    "Upload",
    "OTPCode",
]
