"""
Social application settings.

Extends the base settings with application-specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Application-specific settings."""

    # ==========================================================================
    # Accounts
    # ==========================================================================
    MIN_PASSWORD_LENGTH: int = 6

    # ==========================================================================
    # Suggestions
    # ==========================================================================
    # Random users drawn before filtering out already-followed ones
    SUGGESTED_USERS_SAMPLE: int = 10
    # Users returned to the client
    SUGGESTED_USERS_LIMIT: int = 4


# Global settings instance
settings = Settings()
