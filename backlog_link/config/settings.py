"""
Backlog Link Configuration Module

Environment-based configuration with fail-fast validation.
All settings are loaded from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_prefix="BACKLOG_LINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    locale: Literal["en", "ja"] = Field(
        default="en",
        description="Locale of form validation messages",
    )
    data_dir: Path = Field(
        default=Path("./data"),
        description="Directory for runtime data (db, encryption key)",
    )

    # GUI
    port: int = Field(
        default=8553,
        ge=1,
        le=65535,
        description="Port of the configuration web UI",
    )

    @field_validator("data_dir", mode="before")
    @classmethod
    def ensure_path(cls, v: str | Path) -> Path:
        """Convert string to Path."""
        return Path(v)

    def ensure_data_dir(self) -> None:
        """Create data directory if it doesn't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def database_path(self) -> Path:
        """Path to SQLite database holding job properties."""
        return self.data_dir / "backlog_link.db"

    @property
    def encryption_key_path(self) -> Path:
        """Path to the key sealing secrets at rest."""
        return self.data_dir / ".key"


def get_settings() -> Settings:
    """
    Get validated settings instance.

    Raises:
        ValidationError: If settings are invalid.
    """
    settings = Settings()
    settings.ensure_data_dir()
    return settings
