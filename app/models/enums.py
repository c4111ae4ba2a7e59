"""
Database Enums

Python Enums that map to PostgreSQL ENUM types.

Member values are the wire values stored in the database and exchanged
with the browser client.
"""

import enum


class UserRole(str, enum.Enum):
    """User role enumeration."""
    STUDENT = "estudiante"
    FACULTY = "docente"
    GUEST = "invitado"
    ADMIN = "admin"


class CertificateType(str, enum.Enum):
    """Certificate category enumeration."""
    DIPLOMA = "diplomado"
    REFRESHER_COURSE = "curso-actualizacion"
    TEACHING_WORKSHOP = "taller-didactico"
    RESEARCH_SEMINAR = "seminario-investigacion"
    CONFERENCE = "congreso"
    TALK = "ponencia"
    PUBLICATION = "publicacion"
    COMPETENCY_CERTIFICATION = "certificacion-competencias"
    MOOC = "mooc"
    THESIS_ADVISORY = "asesoria-tesis"
    INSTITUTIONAL_RECOGNITION = "reconocimiento-uabc"
    OTHER = "otro"


class Department(str, enum.Enum):
    """Academic department enumeration."""
    EDUCATION_SCIENCES = "ciencias-educacion"
    ENGINEERING = "ingenieria"
    HUMANITIES = "humanidades"
    HEALTH_SCIENCES = "ciencias-salud"
    ARTS = "artes"
    SPORTS = "deportes"
    ADMINISTRATION = "administracion"
    ECONOMICS = "economia"
    LAW = "juridicas"
    OTHER = "otro"


class SemesterTerm(str, enum.Enum):
    """Half of the academic year."""
    JAN_JUN = "ene-jun"
    JUL_DEC = "jul-dic"


class Modality(str, enum.Enum):
    """How the activity was delivered."""
    IN_PERSON = "presencial"
    ONLINE = "en-linea"
    HYBRID = "mixta"


class UploadCategory(str, enum.Enum):
    """General upload category."""
    GENERAL = "general"
    CERTIFICATE = "certificate"


class OTPPurpose(str, enum.Enum):
    """OTP purpose enumeration."""
    PASSWORD_RESET = "PASSWORD_RESET"


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    """Persist member values (not names) in PostgreSQL ENUM columns."""
    return [member.value for member in enum_cls]
