"""Initial schema.

Users, certificates, general uploads and password reset codes.

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19
"""

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


user_role = postgresql.ENUM(
    "estudiante", "docente", "invitado", "admin",
    name="user_role",
    create_type=False,
)
certificate_type = postgresql.ENUM(
    "diplomado",
    "curso-actualizacion",
    "taller-didactico",
    "seminario-investigacion",
    "congreso",
    "ponencia",
    "publicacion",
    "certificacion-competencias",
    "mooc",
    "asesoria-tesis",
    "reconocimiento-uabc",
    "otro",
    name="certificate_type",
    create_type=False,
)
department = postgresql.ENUM(
    "ciencias-educacion",
    "ingenieria",
    "humanidades",
    "ciencias-salud",
    "artes",
    "deportes",
    "administracion",
    "economia",
    "juridicas",
    "otro",
    name="department",
    create_type=False,
)
semester_term = postgresql.ENUM("ene-jun", "jul-dic", name="semester_term", create_type=False)
modality = postgresql.ENUM("presencial", "en-linea", "mixta", name="modality", create_type=False)
upload_category = postgresql.ENUM("general", "certificate", name="upload_category", create_type=False)
otp_purpose = postgresql.ENUM("PASSWORD_RESET", name="otp_purpose", create_type=False)

ENUMS = (
    user_role,
    certificate_type,
    department,
    semester_term,
    modality,
    upload_category,
    otp_purpose,
)


def upgrade() -> None:
    bind = op.get_bind()
    for enum_type in ENUMS:
        enum_type.create(bind, checkfirst=True)

    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("role", user_role, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("phone", sa.String(20), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("avatar_b64", sa.Text(), nullable=True),
        sa.Column("google_id", sa.String(255), nullable=True),
        sa.Column("auth_provider", sa.String(50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_google_id", "users", ["google_id"], unique=True)

    op.create_table(
        "certificates",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("type", certificate_type, nullable=False),
        sa.Column("type_other", sa.String(255), nullable=True),
        sa.Column("department", department, nullable=False),
        sa.Column("department_other", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("issuer", sa.String(255), nullable=True),
        sa.Column("modality", modality, nullable=True),
        sa.Column("hours", sa.Integer(), nullable=True),
        sa.Column("semester_term", semester_term, nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("issued_on", sa.Date(), nullable=True),
        sa.Column("file_name", sa.String(255), nullable=False),
        sa.Column("content_type", sa.String(100), nullable=False),
        sa.Column("size", sa.Integer(), nullable=False),
        sa.Column("data", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint("year BETWEEN 2000 AND 2100", name="ck_certificates_year"),
        sa.CheckConstraint("hours IS NULL OR hours > 0", name="ck_certificates_hours"),
    )
    op.create_index("ix_certificates_user_id", "certificates", ["user_id"])
    op.create_index("ix_certificates_year", "certificates", ["year"])

    op.create_table(
        "uploads",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("category", upload_category, nullable=False),
        sa.Column("semester_term", semester_term, nullable=True),
        sa.Column("issued_on", sa.Date(), nullable=True),
        sa.Column("content_type", sa.String(100), nullable=False),
        sa.Column("size", sa.Integer(), nullable=False),
        sa.Column("data", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_uploads_user_id", "uploads", ["user_id"])

    op.create_table(
        "otp_codes",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("code_hash", sa.String(255), nullable=False),
        sa.Column("purpose", otp_purpose, nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("used_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_used", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_otp_codes_email", "otp_codes", ["email"])


def downgrade() -> None:
    op.drop_index("ix_otp_codes_email", table_name="otp_codes")
    op.drop_table("otp_codes")
    op.drop_index("ix_uploads_user_id", table_name="uploads")
    op.drop_table("uploads")
    op.drop_index("ix_certificates_year", table_name="certificates")
    op.drop_index("ix_certificates_user_id", table_name="certificates")
    op.drop_table("certificates")
    op.drop_index("ix_users_google_id", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")

    bind = op.get_bind()
    for enum_type in reversed(ENUMS):
        enum_type.drop(bind, checkfirst=True)
