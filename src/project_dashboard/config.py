"""Dashboard configuration with pydantic-settings.

Every field can be set through a ``DASHBOARD_``-prefixed environment variable
or a local ``.env`` file, e.g. ``DASHBOARD_DATA_DIR=/tmp/dashboard``.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from project_dashboard.storage import DEFAULT_STORE_KEY


class Settings(BaseSettings):
    """Project dashboard settings."""

    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(
        default=Path("~/.project-dashboard"),
        description="Directory holding the stored project collection",
    )
    store_key: str = Field(
        default=DEFAULT_STORE_KEY,
        min_length=1,
        description="Key (file stem) of the stored collection",
    )
    export_dir: Path = Field(
        default=Path("."),
        description="Directory that exports and the CSV template are written to",
    )

    # Logging configuration
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v


def get_settings() -> Settings:
    return Settings()
