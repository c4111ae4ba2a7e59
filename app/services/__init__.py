"""
Certificate Portal - Services Module

Business logic layer.
"""

from app.services import file_service
from app.services import avatar_service
from app.services import otp_service
from app.services import email_service
from app.services import auth_service
from app.services import user_service
from app.services import certificate_service
from app.services import upload_service
from app.services import admin_service
from app.services import report_service

__all__ = [
    "file_service",
    "avatar_service",
    "otp_service",
    "email_service",
    "auth_service",
    "user_service",
    "certificate_service",
    "upload_service",
    "admin_service",
    "report_service",
]
