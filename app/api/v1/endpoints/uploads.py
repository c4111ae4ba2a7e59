"""
Upload Routes

General file uploads of the current user.
"""

import uuid
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, File, Form, Query, Response, UploadFile, status

from app.api.deps import ActiveUser, DbSession
from app.core.config import settings
from app.models.enums import SemesterTerm, UploadCategory
from app.models.upload import Upload
from app.schemas.upload import UploadResponse
from app.services import upload_service
from app.services.file_service import file_response, read_upload
from app.services.upload_service import UploadView


router = APIRouter(prefix="/uploads", tags=["Uploads"])


@router.get(
    "/",
    response_model=List[UploadResponse],
    summary="List my uploads",
)
async def list_uploads(
    current_user: ActiveUser,
    db: DbSession,
    view: UploadView = Query(UploadView.ALL, description="all, certificate, images or pdfs"),
    q: Optional[str] = Query(None, description="Search by file name"),
) -> List[Upload]:
    return await upload_service.list_uploads(current_user.id, db, view=view, q=q)


@router.post(
    "/",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload a file",
)
async def create_upload(
    current_user: ActiveUser,
    db: DbSession,
    file: UploadFile = File(...),
    category: UploadCategory = Form(UploadCategory.GENERAL),
    title: Optional[str] = Form(None),
    semester_term: Optional[SemesterTerm] = Form(None),
    issued_on: Optional[date] = Form(None),
) -> Upload:
    """
    Store a file of up to 1 MB.

    Raises:
        HTTPException: 413 if the file is too large, 415 for other types.
    """
    payload = await read_upload(file, settings.MAX_UPLOAD_BYTES)
    return await upload_service.create_upload(
        current_user,
        payload,
        db,
        category=category,
        title=title,
        semester_term=semester_term,
        issued_on=issued_on,
    )


@router.get(
    "/{upload_id}/file",
    summary="Download an uploaded file",
    response_class=Response,
)
async def download_upload(
    upload_id: uuid.UUID,
    current_user: ActiveUser,
    db: DbSession,
) -> Response:
    upload = await upload_service.get_upload(upload_id, current_user.id, db)
    return file_response(upload.name, upload.data)


@router.delete(
    "/{upload_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an upload",
)
async def delete_upload(
    upload_id: uuid.UUID,
    current_user: ActiveUser,
    db: DbSession,
) -> None:
    upload = await upload_service.get_upload(upload_id, current_user.id, db)
    await upload_service.delete_upload(upload, db)
