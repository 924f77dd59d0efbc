"""
Configuration management for the Readiness Assessment service.

All environment variables are loaded here with their default values.
Every setting is optional; the defaults run a local single-process server.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment Variable Reference:
    - SESSION_TTL_SECONDS: idle lifetime of an in-memory assessment session
    - SESSION_MAX_COUNT: upper bound on concurrently held sessions
    """

    # Application settings
    app_name: str = "Readiness Assessment"
    app_version: str = "1.0.0"
    debug: bool = False

    # Session table settings (in-memory only, nothing is persisted)
    session_ttl_seconds: int = 7200  # 2 hours idle
    session_max_count: int = 10000

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
