"""Configuration management for slashline."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from slashline.commands.registry import MATCH_MODES


CONFIG_DIR = Path.home() / ".config" / "slashline"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_MATCH_MODE = "prefix"
DEFAULT_MAX_SUGGESTIONS = 8
DEFAULT_HISTORY_SIZE = 100
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _positive_int(value, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return default
    return value


@dataclass
class Config:
    """Application configuration."""

    match_mode: str = DEFAULT_MATCH_MODE
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    history_size: int = DEFAULT_HISTORY_SIZE
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Build a config, falling back to defaults for bad values."""
        match_mode = data.get("match_mode", DEFAULT_MATCH_MODE)
        if match_mode not in MATCH_MODES:
            match_mode = DEFAULT_MATCH_MODE

        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            log_level = "WARNING"

        return cls(
            match_mode=match_mode,
            max_suggestions=_positive_int(data.get("max_suggestions"), DEFAULT_MAX_SUGGESTIONS),
            history_size=_positive_int(data.get("history_size"), DEFAULT_HISTORY_SIZE),
            log_level=log_level,
        )

    def to_dict(self) -> dict:
        return {
            "match_mode": self.match_mode,
            "max_suggestions": self.max_suggestions,
            "history_size": self.history_size,
            "log_level": self.log_level,
        }

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load config from file, or return defaults."""
        path = path or CONFIG_FILE
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError):
            return cls()

        if not isinstance(data, dict):
            return cls()
        return cls.from_dict(data)

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        path = path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
