"""
Certificate Portal - Schemas Module

Pydantic models for request/response validation.
"""

from app.schemas.user import UserCreate, UserResponse, ProfileUpdate
from app.schemas.auth import Token
from app.schemas.certificate import (
    CertificateCreate,
    CertificateUpdate,
    CertificateResponse,
    CertificateDetail,
)
from app.schemas.upload import UploadResponse
from app.schemas.admin import (
    AdminUserRow,
    AdminUserListResponse,
    AdminUserDetail,
    RoleUpdate,
)
from app.schemas.report import ReportResponse

__all__ = [
    # User
    "UserCreate",
    "UserResponse",
    "ProfileUpdate",
    # Auth
    "Token",
    # Certificate
    "CertificateCreate",
    "CertificateUpdate",
    "CertificateResponse",
    "CertificateDetail",
    # Upload
    "UploadResponse",
    # Admin
    "AdminUserRow",
    "AdminUserListResponse",
    "AdminUserDetail",
    "RoleUpdate",
    # Report
    "ReportResponse",
]
