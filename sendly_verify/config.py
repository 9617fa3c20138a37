from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # project root
TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

DEFAULT_SENDLY_BASE_URL = "https://sendly.live/api/v1"


class Settings(BaseSettings):
    """Server settings with validation.

    SENDLY_API_KEY is required; every other field has a default.
    Values come from environment variables or the .env file in the project root.
    """

    # Sendly API - required
    sendly_api_key: str = Field(min_length=1, description="Sendly API key used as Bearer token")
    sendly_base_url: str = Field(
        default=DEFAULT_SENDLY_BASE_URL,
        pattern=r"^https?://",
        description="Base URL of the Sendly REST API",
    )
    sendly_timeout_seconds: float = Field(default=30.0, gt=0, description="Timeout for Sendly API calls")

    # Server settings
    host: str = Field(default="0.0.0.0", min_length=1, description="Interface to bind")
    port: int = Field(ge=1, le=65535, default=8080, description="Port to listen on")
    log_level: str = Field(default="INFO", description="Root log level")

    templates_dir: Path = Field(default=TEMPLATES_DIR, description="Directory holding the HTML pages")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("sendly_api_key", mode="after")
    @classmethod
    def validate_sendly_api_key(cls, v: str) -> str:
        """Reject keys made only of whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("SENDLY_API_KEY environment variable is required")
        return v

    @field_validator("sendly_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    The .env file is read once; later calls return the cached instance.

    Returns:
        Cached Settings instance

    Raises:
        pydantic.ValidationError: If SENDLY_API_KEY is missing or a value is invalid
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached Settings instance so the next call re-reads the environment."""
    global _settings_instance
    _settings_instance = None
