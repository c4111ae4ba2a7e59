"""
Certificate Schemas

Pydantic models for certificate metadata and responses.
"""

import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from app.models.enums import CertificateType, Department, Modality, SemesterTerm


# ============== Shared Rules ==============

# Free-text fields stored trimmed, blank as NULL
OPTIONAL_TEXT_FIELDS = ("type_other", "department_other", "description", "issuer")


def strip_or_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def check_other_fields(
    cert_type: Optional[CertificateType],
    type_other: Optional[str],
    department: Optional[Department],
    department_other: Optional[str],
) -> None:
    """
    Free-text companions of the "other" choices.

    Raises:
        ValueError: When a required free-text field is missing or too short.
    """
    if cert_type == CertificateType.OTHER and not (type_other or "").strip():
        raise ValueError("Especifica el tipo de certificado")
    if department == Department.OTHER and len((department_other or "").strip()) < 3:
        raise ValueError("Especifica el departamento (mínimo 3 caracteres)")


# ============== Requests ==============

class CertificateBase(BaseModel):
    """Metadata entered on the registration form."""

    title: str = Field(..., min_length=1, max_length=255, description="Certificate title")
    type: CertificateType
    type_other: Optional[str] = Field(None, max_length=255)
    department: Department
    department_other: Optional[str] = Field(None, max_length=255)
    semester_term: SemesterTerm
    year: int = Field(..., ge=2000, le=2100)
    description: Optional[str] = None
    issuer: Optional[str] = Field(None, max_length=255)
    modality: Optional[Modality] = None
    hours: Optional[int] = Field(None, gt=0)
    issued_on: Optional[date] = None

    @model_validator(mode="after")
    def validate_other_fields(self) -> "CertificateBase":
        self.title = self.title.strip()
        for field in OPTIONAL_TEXT_FIELDS:
            setattr(self, field, strip_or_none(getattr(self, field)))
        if not self.title:
            raise ValueError("El título es obligatorio")
        check_other_fields(
            self.type, self.type_other, self.department, self.department_other
        )
        if self.type != CertificateType.OTHER:
            self.type_other = None
        if self.department != Department.OTHER:
            self.department_other = None
        return self


class CertificateCreate(CertificateBase):
    """Schema for a new certificate; the file travels alongside as multipart."""


class CertificateUpdate(BaseModel):
    """Partial metadata update. The "other" rules are re-checked against the merged record."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[CertificateType] = None
    type_other: Optional[str] = Field(None, max_length=255)
    department: Optional[Department] = None
    department_other: Optional[str] = Field(None, max_length=255)
    semester_term: Optional[SemesterTerm] = None
    year: Optional[int] = Field(None, ge=2000, le=2100)
    description: Optional[str] = None
    issuer: Optional[str] = Field(None, max_length=255)
    modality: Optional[Modality] = None
    hours: Optional[int] = Field(None, gt=0)
    issued_on: Optional[date] = None


# ============== Responses ==============

class CertificateResponse(BaseModel):
    """Certificate metadata without the inline file."""

    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    type: CertificateType
    type_other: Optional[str] = None
    department: Department
    department_other: Optional[str] = None
    semester_term: SemesterTerm
    year: int
    description: Optional[str] = None
    issuer: Optional[str] = None
    modality: Optional[Modality] = None
    hours: Optional[int] = None
    issued_on: Optional[date] = None
    file_name: str
    content_type: str
    size: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CertificateDetail(CertificateResponse):
    """Certificate including its data URL, for previews."""

    data: str
