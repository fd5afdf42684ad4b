"""Configuration management for evensplit."""

from pathlib import Path

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EVENSPLIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Display currency when the snapshot does not name one
    currency: str = "USD"

    # Event snapshot used when --snapshot is not given
    snapshot_path: Path = Path.home() / ".evensplit" / "event.json"

    # Payment recording policy (the engine itself always tolerates overpayment)
    allow_overpayment: bool = False

    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Load application settings from environment variables."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(
            f"Failed to load settings. Check your EVENSPLIT_* environment "
            f"variables and .env file.\n"
            f"Error: {e}"
        ) from e
