"""
Environment-driven settings shared by the API entry point and its services.

Values come from the process environment or a local .env file via
pydantic-settings. Application code subclasses BaseAppSettings to add its
own knobs.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        SUGGESTED_USERS_LIMIT: int = 4

    settings = Settings()
    settings.validate_required()
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """Database, session and server configuration."""

    # ==========================================================================
    # Database
    # ==========================================================================
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "social"
    MONGODB_TIMEOUT_MS: int = 5000

    # ==========================================================================
    # Sessions
    # ==========================================================================
    # No default: startup refuses to run without a signing secret
    JWT_SECRET: Optional[str] = None
    JWT_ALGORITHM: str = "HS256"
    SESSION_EXPIRE_DAYS: int = 15
    SESSION_COOKIE_NAME: str = "jwt"

    BCRYPT_ROUNDS: int = 10

    # ==========================================================================
    # Server
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    ENVIRONMENT: str = "development"  # development, staging, production
    LOG_LEVEL: str = "INFO"

    # Comma-separated; the session cookie needs explicit origins in browsers
    CORS_ORIGINS: str = "http://localhost:3000"
    CORS_ALLOW_CREDENTIALS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    def get_cors_origins(self) -> List[str]:
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def is_production(self) -> bool:
        """Session cookies are marked Secure only in production."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    def validate_required(self) -> None:
        """
        Check settings the app cannot start without.

        Raises:
            ValueError: Listing every problem found
        """
        errors = []

        if not self.JWT_SECRET:
            errors.append("JWT_SECRET is required to sign session tokens")

        if not self.MONGODB_URI:
            errors.append("MONGODB_URI is required")

        if self.SESSION_EXPIRE_DAYS <= 0:
            errors.append("SESSION_EXPIRE_DAYS must be positive")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
