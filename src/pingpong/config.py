"""Configuration models for pingpong."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StorageConfig(BaseModel):
    """Configuration for the task file."""

    data_file: str = "data/pingpong.txt"
    sample_data: bool = True
    """Seed demonstration tasks when the task file does not exist yet."""


class LoggingConfig(BaseModel):
    """Configuration for diagnostic logging."""

    directory: str = ".pingpong"
    console_level: LogLevel = "WARNING"
    file_level: LogLevel = "DEBUG"


class DisplayConfig(BaseModel):
    """Configuration for console output."""

    bot_name: str = "Pingpong"
    show_dividers: bool = True


class PingpongConfig(BaseModel):
    """Main configuration for pingpong."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> PingpongConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(exclude_none=True), f, indent=2)


# Default config directory
PINGPONG_DIR = Path(".pingpong")
CONFIG_FILE = PINGPONG_DIR / "config.json"
LOG_FILE_NAME = "pingpong.log"
