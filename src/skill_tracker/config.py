"""Configuration management for the application."""

import json
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TRACKER_CONFIG_PATH = "config/tracker.json"


class TrackerConfig(BaseSettings):
    """Display configuration for skill cards, history and chart."""

    chart_label_max_chars: int = Field(default=10, gt=0)
    timestamp_format: str = "%Y-%m-%d %H:%M"
    default_unit: Literal["hours", "minutes"] = "hours"

    @classmethod
    def from_file(cls, filepath: str = TRACKER_CONFIG_PATH) -> "TrackerConfig":
        """
        Load tracker configuration from JSON file.

        Args:
            filepath: Path to the configuration file

        Returns:
            TrackerConfig instance
        """
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls(**data)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Data root: the skills file and the SQLite DB live here (outside the repo)
    data_root: str = Field(default="~/Documents/skill_tracker")

    # Storage backend the ledger persists through
    storage_backend: Literal["json", "sqlite"] = Field(default="json")
    skills_file: str | None = Field(default=None)
    database_url: str | None = Field(default=None)

    # Backend Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000)
    log_level: str = Field(default="INFO")

    # Frontend
    frontend_url: str = Field(default="http://localhost:3000")

    @model_validator(mode="after")
    def derive_paths(self) -> "Settings":
        """Expand data_root and derive storage locations if not explicitly set."""
        self.data_root = str(Path(self.data_root).expanduser().resolve())
        if self.skills_file is None:
            self.skills_file = str(Path(self.data_root) / "skills.json")
        if self.database_url is None:
            self.database_url = f"sqlite:///{self.data_root}/skill_tracker.db"
        return self


# Global settings instance
settings = Settings()

# Display configuration falls back to defaults when the file is absent
tracker_config = (
    TrackerConfig.from_file() if Path(TRACKER_CONFIG_PATH).exists() else TrackerConfig()
)
