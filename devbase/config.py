"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

import re
from datetime import timedelta
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_DURATION_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}


def parse_duration(value: str) -> timedelta:
    """
    Parse a duration such as "15m", "7d", "12h", "30s" or "900" (seconds).

    Raises:
        ValueError: If the value is not a recognised duration
    """
    match = _DURATION_PATTERN.match(str(value).lower())
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit]: int(amount)})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")

    # API Configuration
    api_title: str = Field(default="DevBase API")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/api")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4000)

    # Database
    database_url: str = Field(..., min_length=1, description="SQLAlchemy database URL")
    database_auto_create: bool = Field(default=False, description="Create tables on startup")

    # JWT Configuration
    jwt_access_secret: str = Field(..., min_length=1, description="Access token signing secret")
    jwt_refresh_secret: str = Field(..., min_length=1, description="Refresh token signing secret")
    jwt_access_expires_in: str = Field(default="15m")
    jwt_refresh_expires_in: str = Field(default="7d")
    jwt_algorithm: str = Field(default="HS256")

    # Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # Refresh cookie
    refresh_cookie_name: str = Field(default="refreshToken")

    # CORS
    cors_origins: str = Field(default="*", description="Comma-separated origins or *")

    # Trusted hosts (production only)
    allowed_hosts: str = Field(default="*", description="Comma-separated host names or *")

    # Rate Limiting
    rate_limit_enabled: bool = Field(default=True)
    rate_limit_requests: int = Field(default=300)
    rate_limit_period: int = Field(default=900)  # seconds
    login_rate_limit_requests: int = Field(default=10)
    login_rate_limit_period: int = Field(default=600)  # seconds

    # Sentry (Optional)
    sentry_dsn: Optional[str] = Field(default=None)
    sentry_traces_sample_rate: float = Field(default=0.1)

    @field_validator("jwt_access_expires_in", "jwt_refresh_expires_in")
    @classmethod
    def validate_duration(cls, v: str) -> str:
        """Reject durations that cannot be parsed at startup rather than at first sign."""
        parse_duration(v)
        return v

    @model_validator(mode="after")
    def validate_distinct_secrets(self) -> "Settings":
        if self.jwt_access_secret == self.jwt_refresh_secret:
            raise ValueError("JWT_ACCESS_SECRET and JWT_REFRESH_SECRET must be different")
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def access_token_ttl(self) -> timedelta:
        return parse_duration(self.jwt_access_expires_in)

    @property
    def refresh_token_ttl(self) -> timedelta:
        return parse_duration(self.jwt_refresh_expires_in)

    @property
    def refresh_cookie_path(self) -> str:
        """The refresh cookie is only sent to the auth routes."""
        return f"{self.api_prefix}/auth"

    @property
    def allowed_origins(self) -> Optional[List[str]]:
        """Parsed CORS origins, or None when every origin is allowed."""
        origins = [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        if not origins or "*" in origins:
            return None
        return origins

    @property
    def trusted_hosts(self) -> List[str]:
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()] or ["*"]

    @property
    def database_url_async(self) -> str:
        """Get async database URL for SQLAlchemy."""
        if self.database_url.startswith("postgresql://"):
            return self.database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return self.database_url


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Fails fast when a required variable (JWT secrets, DATABASE_URL) is missing.
    """
    return Settings()
