"""
Application Configuration

Uses Pydantic Settings for environment variable management with validation.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str
    DATABASE_SSL: bool = True

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 10080  # 7 days

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # Institutional email domains allowed to sign in
    ALLOWED_EMAIL_DOMAINS: str = "uabc.edu.mx,uabc.mx"

    # File limits (inline data must fit the database row comfortably)
    MAX_CERTIFICATE_BYTES: int = 943718  # 0.9 MB
    MAX_UPLOAD_BYTES: int = 1048576  # 1 MB
    ALLOWED_CONTENT_TYPES: str = "image/jpeg,image/png,image/webp,image/gif,application/pdf"

    # Avatars
    AVATAR_SIZE: int = 256
    AVATAR_QUALITY: int = 80
    AVATAR_FALLBACK_QUALITY: int = 70
    AVATAR_MAX_BYTES: int = 204800  # 200 KB encoded
    AVATAR_MAX_RAW_BYTES: int = 5242880  # 5 MB
    AVATAR_CONTENT_TYPES: str = "image/jpeg,image/png,image/webp"

    # Pagination
    REPORT_PAGE_SIZE: int = 20
    ADMIN_PAGE_SIZE: int = 20

    # Password reset codes
    OTP_EXPIRE_MINUTES: int = 10
    OTP_RESEND_COOLDOWN_SECONDS: int = 60

    # SMTP
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    EMAIL_FROM_ADDRESS: str = "no-reply@uabc.mx"
    EMAIL_FROM_NAME: str = "Portal de Certificados"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def allowed_email_domains_list(self) -> List[str]:
        """Parse institutional domains from comma-separated string."""
        return [
            domain.strip().lower()
            for domain in self.ALLOWED_EMAIL_DOMAINS.split(",")
            if domain.strip()
        ]

    @property
    def allowed_content_types_list(self) -> List[str]:
        return [ct.strip() for ct in self.ALLOWED_CONTENT_TYPES.split(",") if ct.strip()]

    @property
    def avatar_content_types_list(self) -> List[str]:
        return [ct.strip() for ct in self.AVATAR_CONTENT_TYPES.split(",") if ct.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are only loaded once.
    """
    return Settings()


# Global settings instance
settings = get_settings()
