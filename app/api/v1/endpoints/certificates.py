"""
Certificate Routes

Owner-scoped certificate registration, listing, editing and download.
"""

import uuid
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status

from app.api.deps import ActiveUser, DbSession
from app.api.v1.endpoints.forms import certificate_form
from app.core.config import settings
from app.models.certificate import Certificate
from app.models.enums import CertificateType, Department, SemesterTerm
from app.reporting import FacetSelection
from app.schemas.certificate import (
    CertificateCreate,
    CertificateDetail,
    CertificateResponse,
    CertificateUpdate,
)
from app.services import certificate_service
from app.services.file_service import file_response, read_upload


router = APIRouter(prefix="/certificates", tags=["Certificates"])


@router.get(
    "/",
    response_model=List[CertificateResponse],
    summary="List my certificates",
)
async def list_certificates(
    current_user: ActiveUser,
    db: DbSession,
    type: Optional[CertificateType] = Query(None, description="Certificate type"),
    department: Optional[Department] = Query(None, description="Department"),
    semester_term: Optional[SemesterTerm] = Query(None, description="ene-jun or jul-dic"),
    year: Optional[int] = Query(None, ge=2000, le=2100, description="Academic year"),
    q: Optional[str] = Query(None, description="Search title, description and issuer"),
) -> List[Certificate]:
    """
    List the current user's certificates, newest first.

    All filters are optional and combine with AND.
    """
    selection = FacetSelection(
        type=type,
        department=department,
        semester_term=semester_term,
        year=year,
        search=q,
    )
    return await certificate_service.list_user_certificates(current_user.id, db, selection)


@router.post(
    "/",
    response_model=CertificateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a certificate",
)
async def create_certificate(
    current_user: ActiveUser,
    db: DbSession,
    metadata: Annotated[CertificateCreate, Depends(certificate_form)],
    file: UploadFile = File(..., description="JPEG, PNG, WebP, GIF or PDF"),
) -> Certificate:
    """
    Register a certificate with its file.

    Raises:
        HTTPException: 400 for invalid metadata.
        HTTPException: 413 if the file is too large, 415 for other types.
    """
    payload = await read_upload(file, settings.MAX_CERTIFICATE_BYTES)
    return await certificate_service.create_certificate(current_user, metadata, payload, db)


@router.get(
    "/{certificate_id}",
    response_model=CertificateDetail,
    summary="Get one of my certificates",
)
async def get_certificate(
    certificate_id: uuid.UUID,
    current_user: ActiveUser,
    db: DbSession,
) -> Certificate:
    """
    Raises:
        HTTPException: 404 if not found or owned by someone else.
    """
    return await certificate_service.get_certificate(certificate_id, db, owner_id=current_user.id)


@router.patch(
    "/{certificate_id}",
    response_model=CertificateResponse,
    summary="Edit certificate metadata",
)
async def update_certificate(
    certificate_id: uuid.UUID,
    data: CertificateUpdate,
    current_user: ActiveUser,
    db: DbSession,
) -> Certificate:
    """
    Raises:
        HTTPException: 404 if not owned, 400 if the result breaks a rule.
    """
    certificate = await certificate_service.get_certificate(
        certificate_id, db, owner_id=current_user.id
    )
    return await certificate_service.update_certificate(certificate, data, db)


@router.put(
    "/{certificate_id}/file",
    response_model=CertificateResponse,
    summary="Replace the certificate file",
)
async def replace_certificate_file(
    certificate_id: uuid.UUID,
    current_user: ActiveUser,
    db: DbSession,
    file: UploadFile = File(...),
) -> Certificate:
    certificate = await certificate_service.get_certificate(
        certificate_id, db, owner_id=current_user.id
    )
    payload = await read_upload(file, settings.MAX_CERTIFICATE_BYTES)
    return await certificate_service.replace_file(certificate, payload, db)


@router.get(
    "/{certificate_id}/file",
    summary="Download the certificate file",
    response_class=Response,
)
async def download_certificate_file(
    certificate_id: uuid.UUID,
    current_user: ActiveUser,
    db: DbSession,
) -> Response:
    certificate = await certificate_service.get_certificate(
        certificate_id, db, owner_id=current_user.id
    )
    return file_response(certificate.file_name, certificate.data)


@router.delete(
    "/{certificate_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete one of my certificates",
)
async def delete_certificate(
    certificate_id: uuid.UUID,
    current_user: ActiveUser,
    db: DbSession,
) -> None:
    certificate = await certificate_service.get_certificate(
        certificate_id, db, owner_id=current_user.id
    )
    await certificate_service.delete_certificate(certificate, db)
