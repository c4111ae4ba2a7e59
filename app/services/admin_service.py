"""
Admin Service

User management for administrators: paginated listing with certificate
counts, role changes, activation toggling, deletion and CSV export.
"""

import enum
import logging
import math
import uuid
from typing import Iterable, List, Optional, Sequence, Tuple

from fastapi import HTTPException, status
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.certificate import Certificate
from app.models.enums import SemesterTerm, UserRole
from app.models.user import User
from app.reporting import build_csv
from app.reporting.labels import role_label


logger = logging.getLogger(__name__)


USER_EXPORT_HEADERS = ["UID", "Nombre", "Email", "Rol", "Estado"]


class CertificateSort(str, enum.Enum):
    """Orderings offered in the admin certificate list."""
    DATE_DESC = "date-desc"
    DATE_ASC = "date-asc"
    TITLE = "title"


# ============== Users ==============

def _user_filters(role: Optional[UserRole], q: Optional[str]) -> list:
    conditions = []
    if role is not None:
        conditions.append(User.role == role)
    term = (q or "").strip().lower()
    if term:
        conditions.append(
            or_(
                func.lower(User.full_name).contains(term, autoescape=True),
                func.lower(User.email).contains(term, autoescape=True),
            )
        )
    return conditions


async def list_users(
    db: AsyncSession,
    page: int = 1,
    size: int = 20,
    role: Optional[UserRole] = None,
    q: Optional[str] = None,
) -> Tuple[List[Tuple[User, int]], int]:
    """
    Get a page of users with their certificate counts.

    Args:
        db: Database session.
        page: Page number (1-indexed).
        size: Items per page.
        role: Only users with this role.
        q: Case-insensitive substring of name or email.

    Returns:
        Tuple of ([(user, certificate_count)], total_count).
    """
    conditions = _user_filters(role, q)

    count_result = await db.execute(
        select(func.count()).select_from(User).where(*conditions)
    )
    total = count_result.scalar() or 0

    cert_count = func.count(Certificate.id).label("certificate_count")
    result = await db.execute(
        select(User, cert_count)
        .outerjoin(Certificate, Certificate.user_id == User.id)
        .where(*conditions)
        .group_by(User.id)
        .order_by(User.created_at.desc(), User.id)
        .offset((page - 1) * size)
        .limit(size)
    )
    rows = [(user, count) for user, count in result.all()]

    return rows, total


def page_count(total: int, size: int) -> int:
    return math.ceil(total / size) if size else 0


async def get_user(user_id: uuid.UUID, db: AsyncSession) -> User:
    """
    Raises:
        HTTPException: 404 if the user does not exist.
    """
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Usuario no encontrado",
        )
    return user


def _ensure_not_self(target: User, admin: User, action: str) -> None:
    if target.id == admin.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"No puedes {action} tu propia cuenta",
        )


async def change_role(
    target: User,
    role: UserRole,
    admin: User,
    db: AsyncSession,
) -> User:
    """
    Set a user's role.

    Raises:
        HTTPException: 400 if an administrator tries to demote themselves.
    """
    if role != UserRole.ADMIN:
        _ensure_not_self(target, admin, "quitar el rol de administrador a")
    target.role = role
    await db.commit()
    await db.refresh(target)

    logger.info("User %s role set to %s by %s", target.id, role.value, admin.id)
    return target


async def toggle_active(target: User, admin: User, db: AsyncSession) -> User:
    """
    Flip the active flag.

    Raises:
        HTTPException: 400 if an administrator targets their own account.
    """
    _ensure_not_self(target, admin, "desactivar")
    target.is_active = not target.is_active
    await db.commit()
    await db.refresh(target)

    logger.info(
        "User %s %s by %s",
        target.id,
        "activated" if target.is_active else "deactivated",
        admin.id,
    )
    return target


async def delete_user(target: User, admin: User, db: AsyncSession) -> None:
    """
    Delete a user together with their certificates and uploads.

    Raises:
        HTTPException: 400 if an administrator targets their own account.
    """
    _ensure_not_self(target, admin, "eliminar")
    # Certificates and uploads go with the row through ON DELETE CASCADE
    await db.delete(target)
    await db.commit()
    logger.info("User %s deleted by %s", target.id, admin.id)


async def list_all_users(db: AsyncSession) -> List[User]:
    result = await db.execute(select(User).order_by(User.created_at.desc(), User.id))
    return list(result.scalars().all())


def build_users_csv(users: Iterable[User]) -> str:
    """CSV of users with Spanish headers, roles and status translated."""
    rows = [
        {
            "UID": str(user.id),
            "Nombre": user.full_name,
            "Email": user.email,
            "Rol": role_label(user.role),
            "Estado": "Activo" if user.is_active else "Inactivo",
        }
        for user in users
    ]
    return build_csv(rows, headers=USER_EXPORT_HEADERS)


# ============== Certificates ==============

def filter_user_certificates(
    certificates: Sequence[Certificate],
    semester_term: Optional[SemesterTerm] = None,
    q: Optional[str] = None,
    sort: CertificateSort = CertificateSort.DATE_DESC,
) -> List[Certificate]:
    """
    Filter and order one user's certificates for the admin detail view.

    The search matches title, file name and description.
    """
    term = (q or "").strip().lower()

    def matches(certificate: Certificate) -> bool:
        if semester_term is not None and certificate.semester_term != semester_term:
            return False
        if not term:
            return True
        return any(
            term in (value or "").lower()
            for value in (certificate.title, certificate.file_name, certificate.description)
        )

    selected = [c for c in certificates if matches(c)]

    if sort == CertificateSort.TITLE:
        return sorted(selected, key=lambda c: c.title.casefold())
    return sorted(
        selected,
        key=lambda c: c.created_at.timestamp() if c.created_at else 0,
        reverse=sort == CertificateSort.DATE_DESC,
    )
