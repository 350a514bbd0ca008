"""Configuration settings for Sector Models."""

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "SECTOR_MODELS_"


class Settings(BaseSettings):
    """Application settings with environment variable support.

    Every variable is read with the ``SECTOR_MODELS_`` prefix, e.g.
    ``SECTOR_MODELS_MODELS_FILE``.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging Configuration
    DEBUG: bool = Field(default=False, description="Debug mode")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # Models File Configuration
    MODELS_FILE: Optional[Path] = Field(
        default=None,
        description="Explicit models.yml path, checked before the built-in candidates",
    )
    MODELS_FILENAME: str = Field(
        default="models.yml", description="File name searched for next to the install and in the cwd"
    )
    MODELS_DEPLOYMENT_PATH: Path = Field(
        default=Path("/app/models.yml"), description="Fixed deployment location of models.yml"
    )

    @field_validator("MODELS_FILE", mode="before")
    @classmethod
    def blank_models_file_is_unset(cls, value: Any) -> Any:
        """Treat ``MODELS_FILE=`` as not set instead of as the current directory."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump()

    def __repr__(self) -> str:
        """String representation of settings."""
        return f"Settings(models_file={self.MODELS_FILE}, log_level={self.LOG_LEVEL}, debug={self.DEBUG})"
