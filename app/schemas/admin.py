"""
Admin Schemas

Pydantic models for the administration console.
"""

from typing import List

from pydantic import BaseModel, Field, computed_field

from app.models.enums import UserRole
from app.reporting import labels
from app.schemas.certificate import CertificateResponse
from app.schemas.user import UserResponse


class AdminUserRow(UserResponse):
    """User row in the admin table."""

    certificate_count: int = 0

    @computed_field
    @property
    def role_label(self) -> str:
        return labels.role_label(self.role)


class AdminUserListResponse(BaseModel):
    """Paginated user listing."""

    items: List[AdminUserRow]
    total: int
    page: int
    size: int
    pages: int


class AdminUserDetail(AdminUserRow):
    """User with all of their certificates."""

    certificates: List[CertificateResponse] = Field(default_factory=list)


class RoleUpdate(BaseModel):
    role: UserRole = Field(..., description="New role")
