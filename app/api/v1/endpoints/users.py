"""
User Routes

Endpoints for the current user's profile and avatar.
"""

from fastapi import APIRouter, File, UploadFile

from app.api.deps import ActiveUser, DbSession
from app.core.config import settings
from app.models.user import User
from app.schemas.user import ProfileUpdate, UserResponse
from app.services import avatar_service, file_service, user_service


router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user profile",
)
async def get_me(current_user: ActiveUser) -> User:
    """
    Get the currently logged-in user's profile.

    Args:
        current_user: Authenticated user from dependency.

    Returns:
        UserResponse: Current user's profile data.
    """
    return current_user


@router.patch(
    "/me",
    response_model=UserResponse,
    summary="Update current user profile",
)
async def update_me(
    profile: ProfileUpdate,
    current_user: ActiveUser,
    db: DbSession,
) -> User:
    """
    Update name, phone or bio. Only provided fields change.

    Args:
        profile: Fields to update.
        current_user: Authenticated user from dependency.
        db: Database session.

    Returns:
        UserResponse: Updated profile.
    """
    return await user_service.update_profile(current_user, profile, db)


@router.put(
    "/me/avatar",
    response_model=UserResponse,
    summary="Upload a profile picture",
)
async def upload_avatar(
    current_user: ActiveUser,
    db: DbSession,
    file: UploadFile = File(..., description="JPEG, PNG or WebP image"),
) -> User:
    """
    Store a 256x256 JPEG version of the uploaded picture.

    Raises:
        HTTPException: 415 for other formats, 413 above 5 MB, 400 if unreadable.
    """
    content = await file_service.read_limited(file, settings.AVATAR_MAX_RAW_BYTES)
    avatar = avatar_service.build_avatar(content, file.content_type or "")
    return await user_service.set_avatar(current_user, avatar, db)


@router.delete(
    "/me/avatar",
    response_model=UserResponse,
    summary="Remove the profile picture",
)
async def delete_avatar(current_user: ActiveUser, db: DbSession) -> User:
    return await user_service.set_avatar(current_user, None, db)
