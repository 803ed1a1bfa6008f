"""Configuration management for the application."""

import json
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotificationConfig(BaseSettings):
    """Notification bucket configuration."""

    create_missing_buckets: bool = False
    append_max_attempts: int = Field(default=3, ge=1)
    append_backoff_seconds: float = Field(default=0.05, ge=0)

    @classmethod
    def from_file(cls, filepath: str = "config/notifications.json") -> "NotificationConfig":
        """
        Load notification configuration from JSON file.

        Falls back to defaults when the file does not exist.

        Args:
            filepath: Path to the configuration file

        Returns:
            NotificationConfig instance
        """
        if not Path(filepath).exists():
            return cls()
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls(**data)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Data root: the SQLite DB lives here (outside the repo)
    data_root: str = Field(default="~/Documents/company_directory")

    # Database — auto-derived from data_root if not explicitly set
    database_url: str | None = Field(default=None)

    # Upper bound for a single store call (busy timeout / pool checkout)
    store_timeout_seconds: float = Field(default=5.0, gt=0)

    # Backend Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000)

    # Logging
    log_level: str = Field(default="INFO")
    log_file: str | None = Field(default=None)

    @model_validator(mode="after")
    def derive_paths(self) -> "Settings":
        """Expand data_root and derive database_url if not explicitly set."""
        self.data_root = str(Path(self.data_root).expanduser().resolve())
        if self.database_url is None:
            self.database_url = f"sqlite:///{self.data_root}/company_directory.db"
        return self


# Global settings instance
settings = Settings()

# Load configurations
notification_config = NotificationConfig.from_file()
