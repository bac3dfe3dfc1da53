"""
Report Service Settings

Configuration management using Pydantic settings with environment variable support.
"""

import secrets
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Report Service configuration"""

    # Service Configuration
    service_name: str = Field(default="imei-report-service", description="Service name")
    environment: str = Field(default="development", description="Environment (development, production)")
    port: int = Field(default=8080, description="Service port")
    host: str = Field(default="0.0.0.0", description="Service host")
    log_level: str = Field(default="INFO", description="Root log level")

    # Database Configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///./reports.db",
        description="Database connection URL"
    )

    # Session Configuration
    # A random secret invalidates every admin session on restart; set SESSION_SECRET to keep them.
    session_secret: str = Field(
        default_factory=lambda: secrets.token_hex(32),
        description="Secret used to sign the session cookie"
    )
    session_cookie: str = Field(default="sid", description="Session cookie name")
    session_max_age_seconds: int = Field(default=8 * 60 * 60, description="Session lifetime in seconds")

    # Administrator credentials
    # ADMIN_PASSWORD_HASH (bcrypt) wins over ADMIN_PASSWORD when both are set
    admin_password: Optional[str] = Field(default=None, description="Plain administrator password")
    admin_password_hash: Optional[str] = Field(default=None, description="bcrypt hash of the administrator password")

    # Login throttling
    login_max_attempts: int = Field(default=7, description="Failed logins allowed per origin and window")
    login_window_seconds: int = Field(default=15 * 60, description="Failed login window in seconds")

    # Listings
    admin_list_limit: int = Field(default=500, description="Maximum reports returned to the administrator")

    # CORS Configuration
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
        description="Allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def session_https_only(self) -> bool:
        """Only send the session cookie over HTTPS in production"""
        return self.environment == "production"


# Global settings instance
settings = Settings()
