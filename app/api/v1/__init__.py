"""
API v1 Router

Mounted under ``/api/v1``. Owner-facing routes come first, then the
administration console and the shared reports.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import admin, auth, certificates, reports, uploads, users

router = APIRouter()

# Sign-in, signup and password reset (rate limited)
router.include_router(auth.router)

# Profile and avatar of the current user
router.include_router(users.router)

# The current user's certificates and general uploads
router.include_router(certificates.router)
router.include_router(uploads.router)

# Administrators only
router.include_router(admin.router)

# Any active user
router.include_router(reports.router)
