"""
Runtime Environment Validation Module

Validates the required environment variables at application startup.
If validation fails, the application refuses to start (hard fail).
"""

import sys

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_DATABASE_SCHEMES = ("postgresql", "sqlite")


class StartupSettings(BaseSettings):
    """
    Strict validation schema for the startup environment.

    Required fields MUST be present and valid, or the application will not start.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================================================
    # CRITICAL: Database / CORS
    # ========================================================================
    database_url: str  # REQUIRED: postgresql+asyncpg:// or sqlite+aiosqlite://
    allowed_origins: str  # REQUIRED: Comma-separated list of allowed origins

    # ========================================================================
    # Application Configuration
    # ========================================================================
    app_name: str = "InnFlow"
    debug: bool = False
    reference_prefix: str = Field(default="INF", pattern=r"^[A-Z0-9]{1,10}$")

    # ========================================================================
    # Booking / notification limits
    # ========================================================================
    booking_create_retries: int = Field(default=3, ge=1)
    audit_log_cap: int = Field(default=100, ge=1)
    notification_log_cap: int = Field(default=50, ge=1)
    notification_timeout_seconds: float = Field(default=10.0, gt=0)


def validate_environment() -> StartupSettings:
    """
    Validate required environment variables at startup.

    Returns:
        StartupSettings: Validated settings object

    Raises:
        SystemExit: If validation fails (exit code 1)
    """
    try:
        settings = StartupSettings()
    except ValidationError as e:
        print("❌ FATAL: Environment validation failed", file=sys.stderr)
        print("\nMissing or invalid environment variables:", file=sys.stderr)
        for error in e.errors():
            field = " -> ".join(str(loc) for loc in error["loc"])
            print(f"   • {field}: {error['msg']}", file=sys.stderr)
        print("\nPlease check your .env file or environment variables.", file=sys.stderr)
        sys.exit(1)

    # 1. CORS: wildcard only allowed in debug mode
    if not settings.debug:
        origins = [o.strip() for o in settings.allowed_origins.split(",")]
        if "*" in origins:
            print(
                "❌ FATAL: Wildcard CORS origin (*) detected in production mode.",
                file=sys.stderr
            )
            print(
                "   Set ALLOWED_ORIGINS to specific domains (comma-separated).",
                file=sys.stderr
            )
            sys.exit(1)

    # 2. Database URL: Basic format validation
    if not settings.database_url.startswith(SUPPORTED_DATABASE_SCHEMES):
        print(
            "❌ FATAL: DATABASE_URL must be postgresql+asyncpg:// or sqlite+aiosqlite://",
            file=sys.stderr
        )
        sys.exit(1)

    print("✅ Environment validation passed")
    print(f"   App: {settings.app_name}")
    print(f"   Debug: {settings.debug}")
    print(f"   CORS Origins: {settings.allowed_origins}")

    return settings


if __name__ == "__main__":
    validate_environment()
    print("\n✅ All environment variables are valid!")
