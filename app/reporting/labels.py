"""
Display Labels

Human-readable Spanish labels for every enumeration shown to users.

Each table covers its enum exhaustively. Lookups coerce the raw value
through the enum first, so an unknown value raises ``ValueError`` instead
of leaking an internal identifier into charts or exports.
"""

from app.models.enums import (
    CertificateType,
    Department,
    Modality,
    SemesterTerm,
    UserRole,
)


DEPARTMENT_LABELS: dict[Department, str] = {
    Department.EDUCATION_SCIENCES: "Ciencias de la Educación",
    Department.ENGINEERING: "Ingeniería",
    Department.HUMANITIES: "Humanidades",
    Department.HEALTH_SCIENCES: "Ciencias de la Salud",
    Department.ARTS: "Artes",
    Department.SPORTS: "Deportes",
    Department.ADMINISTRATION: "Administración",
    Department.ECONOMICS: "Economía",
    Department.LAW: "Jurídicas",
    Department.OTHER: "Otro",
}

TYPE_LABELS: dict[CertificateType, str] = {
    CertificateType.DIPLOMA: "Diplomado",
    CertificateType.REFRESHER_COURSE: "Curso de actualización",
    CertificateType.TEACHING_WORKSHOP: "Taller didáctico",
    CertificateType.RESEARCH_SEMINAR: "Seminario de investigación",
    CertificateType.CONFERENCE: "Congreso/Simposio",
    CertificateType.TALK: "Ponencia/Cartel",
    CertificateType.PUBLICATION: "Publicación",
    CertificateType.COMPETENCY_CERTIFICATION: "Certificación de competencias",
    CertificateType.MOOC: "Curso en línea (MOOC)",
    CertificateType.THESIS_ADVISORY: "Asesoría/Comité de tesis",
    CertificateType.INSTITUTIONAL_RECOGNITION: "Reconocimiento UABC",
    CertificateType.OTHER: "Otro",
}

SEMESTER_LABELS: dict[SemesterTerm, str] = {
    SemesterTerm.JAN_JUN: "Ene–Jun",
    SemesterTerm.JUL_DEC: "Jul–Dic",
}

MODALITY_LABELS: dict[Modality, str] = {
    Modality.IN_PERSON: "Presencial",
    Modality.ONLINE: "En línea",
    Modality.HYBRID: "Mixta",
}

ROLE_LABELS: dict[UserRole, str] = {
    UserRole.ADMIN: "Administrador",
    UserRole.FACULTY: "Docente",
    UserRole.STUDENT: "Estudiante",
    UserRole.GUEST: "Invitado",
}


def department_label(value: Department | str) -> str:
    return DEPARTMENT_LABELS[Department(value)]


def type_label(value: CertificateType | str) -> str:
    return TYPE_LABELS[CertificateType(value)]


def semester_label(value: SemesterTerm | str) -> str:
    return SEMESTER_LABELS[SemesterTerm(value)]


def modality_label(value: Modality | str) -> str:
    return MODALITY_LABELS[Modality(value)]


def role_label(value: UserRole | str) -> str:
    return ROLE_LABELS[UserRole(value)]


def certificate_department_label(certificate) -> str:
    """Free-text department for "other" entries, fixed label otherwise."""
    other = getattr(certificate, "department_other", None)
    if certificate.department == Department.OTHER and other:
        return other
    return department_label(certificate.department)


def certificate_type_label(certificate) -> str:
    """Free-text type for "other" entries, fixed label otherwise."""
    other = getattr(certificate, "type_other", None)
    if certificate.type == CertificateType.OTHER and other:
        return other
    return type_label(certificate.type)
