"""
Admin Routes

Administration console: users, roles, activation and any user's
certificates. Every route requires the admin role.
"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status

from app.api.deps import AdminUser, DbSession, require_admin
from app.core.config import settings
from app.models.certificate import Certificate
from app.models.enums import SemesterTerm, UserRole
from app.models.user import User
from app.schemas.admin import (
    AdminUserDetail,
    AdminUserListResponse,
    AdminUserRow,
    RoleUpdate,
)
from app.schemas.certificate import CertificateResponse, CertificateUpdate
from app.schemas.user import UserResponse
from app.services import admin_service, certificate_service
from app.services.admin_service import CertificateSort
from app.services.file_service import read_upload


router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(require_admin)],
)


def to_row(user: User, certificate_count: int = 0) -> AdminUserRow:
    base = UserResponse.model_validate(user).model_dump()
    return AdminUserRow(**base, certificate_count=certificate_count)


# ============== Users ==============

@router.get(
    "/users",
    response_model=AdminUserListResponse,
    summary="List users",
)
async def list_users(
    db: DbSession,
    page: int = Query(1, ge=1, description="Page number"),
    role: Optional[UserRole] = Query(None, description="Only this role"),
    q: Optional[str] = Query(None, description="Search by name or email"),
) -> AdminUserListResponse:
    """
    List users, 20 per page, with how many certificates each one has.

    Args:
        db: Database session.
        page: Page number (1-indexed).
        role: Optional role filter.
        q: Optional name/email search.

    Returns:
        AdminUserListResponse: Paginated users.
    """
    size = settings.ADMIN_PAGE_SIZE
    rows, total = await admin_service.list_users(db, page=page, size=size, role=role, q=q)
    return AdminUserListResponse(
        items=[to_row(user, count) for user, count in rows],
        total=total,
        page=page,
        size=size,
        pages=admin_service.page_count(total, size),
    )


@router.get(
    "/users/export",
    summary="Export users as CSV",
    response_class=Response,
)
async def export_users(db: DbSession) -> Response:
    users = await admin_service.list_all_users(db)
    return Response(
        content=admin_service.build_users_csv(users),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="usuarios.csv"'},
    )


@router.get(
    "/users/{user_id}",
    response_model=AdminUserDetail,
    summary="Get a user with their certificates",
)
async def get_user(user_id: uuid.UUID, db: DbSession) -> AdminUserDetail:
    """
    Raises:
        HTTPException: 404 if the user does not exist.
    """
    user = await admin_service.get_user(user_id, db)
    certificates = await certificate_service.list_user_certificates(user.id, db)
    return AdminUserDetail(
        **to_row(user, len(certificates)).model_dump(exclude={"role_label"}),
        certificates=[CertificateResponse.model_validate(c) for c in certificates],
    )


@router.patch(
    "/users/{user_id}/role",
    response_model=AdminUserRow,
    summary="Change a user's role",
)
async def change_role(
    user_id: uuid.UUID,
    data: RoleUpdate,
    admin: AdminUser,
    db: DbSession,
) -> AdminUserRow:
    """
    Raises:
        HTTPException: 404 if the user does not exist.
        HTTPException: 400 if an administrator demotes themselves.
    """
    user = await admin_service.get_user(user_id, db)
    user = await admin_service.change_role(user, data.role, admin, db)
    return to_row(user)


@router.post(
    "/users/{user_id}/toggle-active",
    response_model=AdminUserRow,
    summary="Activate or deactivate a user",
)
async def toggle_active(
    user_id: uuid.UUID,
    admin: AdminUser,
    db: DbSession,
) -> AdminUserRow:
    user = await admin_service.get_user(user_id, db)
    user = await admin_service.toggle_active(user, admin, db)
    return to_row(user)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user and all their files",
)
async def delete_user(
    user_id: uuid.UUID,
    admin: AdminUser,
    db: DbSession,
) -> None:
    user = await admin_service.get_user(user_id, db)
    await admin_service.delete_user(user, admin, db)


# ============== Certificates ==============

@router.get(
    "/users/{user_id}/certificates",
    response_model=List[CertificateResponse],
    summary="List a user's certificates",
)
async def list_user_certificates(
    user_id: uuid.UUID,
    db: DbSession,
    semester_term: Optional[SemesterTerm] = Query(None, description="ene-jun or jul-dic"),
    q: Optional[str] = Query(None, description="Search title, file name and description"),
    sort: CertificateSort = Query(CertificateSort.DATE_DESC, description="date-desc, date-asc or title"),
) -> List[Certificate]:
    user = await admin_service.get_user(user_id, db)
    certificates = await certificate_service.list_user_certificates(user.id, db)
    return admin_service.filter_user_certificates(
        certificates, semester_term=semester_term, q=q, sort=sort
    )


@router.patch(
    "/certificates/{certificate_id}",
    response_model=CertificateResponse,
    summary="Edit any certificate",
)
async def update_certificate(
    certificate_id: uuid.UUID,
    data: CertificateUpdate,
    db: DbSession,
) -> Certificate:
    certificate = await certificate_service.get_certificate(certificate_id, db)
    return await certificate_service.update_certificate(certificate, data, db)


@router.put(
    "/certificates/{certificate_id}/file",
    response_model=CertificateResponse,
    summary="Replace any certificate's file",
)
async def replace_certificate_file(
    certificate_id: uuid.UUID,
    db: DbSession,
    file: UploadFile = File(...),
) -> Certificate:
    certificate = await certificate_service.get_certificate(certificate_id, db)
    payload = await read_upload(file, settings.MAX_CERTIFICATE_BYTES)
    return await certificate_service.replace_file(certificate, payload, db)


@router.delete(
    "/certificates/{certificate_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete any certificate",
)
async def delete_certificate(certificate_id: uuid.UUID, db: DbSession) -> None:
    certificate = await certificate_service.get_certificate(certificate_id, db)
    await certificate_service.delete_certificate(certificate, db)
