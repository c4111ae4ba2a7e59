"""
Certificate Service

Owner-scoped certificate CRUD. Administrators reuse the same operations
without the ownership check.
"""

import logging
import uuid
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import defer

from app.models.certificate import Certificate
from app.models.enums import CertificateType, Department
from app.models.user import User
from app.reporting import FacetSelection, filter_certificates
from app.schemas.certificate import (
    OPTIONAL_TEXT_FIELDS,
    CertificateCreate,
    CertificateUpdate,
    check_other_fields,
    strip_or_none,
)
from app.services.file_service import FilePayload


logger = logging.getLogger(__name__)


async def list_user_certificates(
    user_id: uuid.UUID,
    db: AsyncSession,
    selection: Optional[FacetSelection] = None,
) -> List[Certificate]:
    """
    Get a user's certificates, newest first, without file data.

    Args:
        user_id: Owner.
        db: Database session.
        selection: Optional facets applied after loading.

    Returns:
        List of certificates.
    """
    result = await db.execute(
        select(Certificate)
        .options(defer(Certificate.data))
        .where(Certificate.user_id == user_id)
        .order_by(Certificate.created_at.desc())
    )
    certificates = list(result.scalars().all())

    if selection is not None:
        certificates = filter_certificates(certificates, selection)
    return certificates


async def get_certificate(
    certificate_id: uuid.UUID,
    db: AsyncSession,
    owner_id: Optional[uuid.UUID] = None,
) -> Certificate:
    """
    Get certificate by ID.

    Args:
        certificate_id: UUID.
        db: Database session.
        owner_id: When given, certificates of other users are reported
            as missing.

    Returns:
        Certificate object.

    Raises:
        HTTPException: 404 if not found or not owned.
    """
    query = select(Certificate).where(Certificate.id == certificate_id)
    if owner_id is not None:
        query = query.where(Certificate.user_id == owner_id)

    result = await db.execute(query)
    certificate = result.scalar_one_or_none()

    if not certificate:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Certificado no encontrado",
        )

    return certificate


async def create_certificate(
    user: User,
    data: CertificateCreate,
    payload: FilePayload,
    db: AsyncSession,
) -> Certificate:
    """
    Register a new certificate for a user.

    Args:
        user: Owner.
        data: Validated metadata.
        payload: Validated file.
        db: Database session.

    Returns:
        The stored certificate.
    """
    certificate = Certificate(
        user_id=user.id,
        **data.model_dump(),
        file_name=payload.file_name,
        content_type=payload.content_type,
        size=payload.size,
        data=payload.data,
    )
    db.add(certificate)
    await db.commit()
    await db.refresh(certificate)

    logger.info("Certificate %s created by user %s", certificate.id, user.id)
    return certificate


async def update_certificate(
    certificate: Certificate,
    data: CertificateUpdate,
    db: AsyncSession,
) -> Certificate:
    """
    Apply a partial metadata update.

    The "other" rules are checked against the merged record, so switching
    a type to ``otro`` without its free text is rejected.

    Raises:
        HTTPException: 400 if the merged record breaks a rule.
    """
    changes = data.model_dump(exclude_unset=True)
    if "title" in changes:
        if changes["title"] is None or not changes["title"].strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="El título es obligatorio",
            )
        changes["title"] = changes["title"].strip()
    for field in OPTIONAL_TEXT_FIELDS:
        if field in changes:
            changes[field] = strip_or_none(changes[field])

    for field in ("type", "department", "semester_term", "year"):
        if field in changes and changes[field] is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{field} no puede quedar vacío",
            )

    merged_type = changes.get("type", certificate.type)
    merged_type_other = changes.get("type_other", certificate.type_other)
    merged_department = changes.get("department", certificate.department)
    merged_department_other = changes.get("department_other", certificate.department_other)
    try:
        check_other_fields(
            merged_type, merged_type_other, merged_department, merged_department_other
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    for field, value in changes.items():
        setattr(certificate, field, value)
    if merged_type != CertificateType.OTHER:
        certificate.type_other = None
    if merged_department != Department.OTHER:
        certificate.department_other = None

    await db.commit()
    await db.refresh(certificate)

    logger.info("Certificate %s updated", certificate.id)
    return certificate


async def replace_file(
    certificate: Certificate,
    payload: FilePayload,
    db: AsyncSession,
) -> Certificate:
    """Swap the stored file while keeping the metadata."""
    certificate.file_name = payload.file_name
    certificate.content_type = payload.content_type
    certificate.size = payload.size
    certificate.data = payload.data

    await db.commit()
    await db.refresh(certificate)

    logger.info("Certificate %s file replaced (%d bytes)", certificate.id, payload.size)
    return certificate


async def delete_certificate(
    certificate: Certificate,
    db: AsyncSession,
) -> None:
    await db.delete(certificate)
    await db.commit()
    logger.info("Certificate %s deleted", certificate.id)
