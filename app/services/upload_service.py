"""
Upload Service

General file uploads: listing by view, creation and deletion.
"""

import enum
import logging
import uuid
from datetime import date
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import defer

from app.models.enums import SemesterTerm, UploadCategory
from app.models.upload import Upload
from app.models.user import User
from app.services.file_service import FilePayload


logger = logging.getLogger(__name__)


class UploadView(str, enum.Enum):
    """Tabs of the uploads page."""
    ALL = "all"
    CERTIFICATE = "certificate"
    IMAGES = "images"
    PDFS = "pdfs"


async def list_uploads(
    user_id: uuid.UUID,
    db: AsyncSession,
    view: UploadView = UploadView.ALL,
    q: Optional[str] = None,
) -> List[Upload]:
    """
    Get a user's uploads, newest first.

    Args:
        user_id: Owner.
        db: Database session.
        view: Category or content-type tab.
        q: Case-insensitive substring of the file name.

    Returns:
        List of uploads without file data.
    """
    query = (
        select(Upload)
        .options(defer(Upload.data))
        .where(Upload.user_id == user_id)
    )

    if view == UploadView.CERTIFICATE:
        query = query.where(Upload.category == UploadCategory.CERTIFICATE)
    elif view == UploadView.IMAGES:
        query = query.where(Upload.content_type.startswith("image/"))
    elif view == UploadView.PDFS:
        query = query.where(Upload.content_type == "application/pdf")

    term = (q or "").strip().lower()
    if term:
        query = query.where(func.lower(Upload.name).contains(term, autoescape=True))

    result = await db.execute(query.order_by(Upload.created_at.desc()))
    return list(result.scalars().all())


async def get_upload(
    upload_id: uuid.UUID,
    user_id: uuid.UUID,
    db: AsyncSession,
) -> Upload:
    """
    Raises:
        HTTPException: 404 if not found or owned by someone else.
    """
    result = await db.execute(
        select(Upload).where(Upload.id == upload_id, Upload.user_id == user_id)
    )
    upload = result.scalar_one_or_none()
    if not upload:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Archivo no encontrado",
        )
    return upload


async def create_upload(
    user: User,
    payload: FilePayload,
    db: AsyncSession,
    category: UploadCategory = UploadCategory.GENERAL,
    title: Optional[str] = None,
    semester_term: Optional[SemesterTerm] = None,
    issued_on: Optional[date] = None,
) -> Upload:
    upload = Upload(
        user_id=user.id,
        name=payload.file_name,
        title=(title or "").strip() or None,
        category=category,
        semester_term=semester_term,
        issued_on=issued_on,
        content_type=payload.content_type,
        size=payload.size,
        data=payload.data,
    )
    db.add(upload)
    await db.commit()
    await db.refresh(upload)

    logger.info("Upload %s stored for user %s", upload.id, user.id)
    return upload


async def delete_upload(upload: Upload, db: AsyncSession) -> None:
    await db.delete(upload)
    await db.commit()
    logger.info("Upload %s deleted", upload.id)
