"""
User Service

Self-service profile changes.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.schemas.user import ProfileUpdate


logger = logging.getLogger(__name__)


async def update_profile(user: User, data: ProfileUpdate, db: AsyncSession) -> User:
    """Apply name, phone and bio changes. Role and active flag are never touched here."""
    for field, value in data.model_dump(exclude_unset=True).items():
        if field == "full_name" and value is None:
            continue
        setattr(user, field, value)

    await db.commit()
    await db.refresh(user)

    logger.info("Profile updated for user %s", user.id)
    return user


async def set_avatar(user: User, avatar_data_url: str | None, db: AsyncSession) -> User:
    user.avatar_b64 = avatar_data_url
    await db.commit()
    await db.refresh(user)
    return user
