"""
Form Dependencies

Multipart form parsing shared by the certificate routes.
"""

from datetime import date
from typing import Optional

from fastapi import Form, HTTPException, status
from pydantic import ValidationError

from app.models.enums import CertificateType, Department, Modality, SemesterTerm
from app.schemas.certificate import CertificateCreate, strip_or_none


def certificate_form(
    title: str = Form(...),
    type: CertificateType = Form(...),
    type_other: Optional[str] = Form(None),
    department: Department = Form(...),
    department_other: Optional[str] = Form(None),
    semester_term: SemesterTerm = Form(...),
    year: int = Form(...),
    description: Optional[str] = Form(None),
    issuer: Optional[str] = Form(None),
    modality: Optional[Modality] = Form(None),
    hours: Optional[int] = Form(None),
    issued_on: Optional[date] = Form(None),
) -> CertificateCreate:
    """
    Build certificate metadata from multipart fields.

    Raises:
        HTTPException: 400 when the metadata breaks a certificate rule.
    """
    try:
        return CertificateCreate(
            title=title,
            type=type,
            type_other=strip_or_none(type_other),
            department=department,
            department_other=strip_or_none(department_other),
            semester_term=semester_term,
            year=year,
            description=strip_or_none(description),
            issuer=strip_or_none(issuer),
            modality=modality,
            hours=hours,
            issued_on=issued_on,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[
                {"loc": err["loc"], "msg": err["msg"]}
                for err in e.errors(include_url=False)
            ],
        ) from e
