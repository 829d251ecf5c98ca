"""
Application configuration and environment variables
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from habitctl.core.exceptions import ConfigError

# Load environment variables
load_dotenv()

DEFAULT_EDITOR = "vi"
HABITS_FILENAME = "habits"
LOG_FILENAME = "log"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    if not (raw.isascii() and raw.isdigit()):
        raise ConfigError(f"{name} must be a non-negative integer, got '{raw}'")
    return int(raw)


class Settings:
    """Application settings loaded from environment variables"""

    def __init__(self):
        # Storage
        self.HABITCTL_DIR: Path = Path(
            os.getenv("HABITCTL_DIR") or Path.home() / ".habitctl"
        ).expanduser()

        # Editor - explicit override first, then the usual $EDITOR
        self.HABITCTL_EDITOR: str = (
            os.getenv("HABITCTL_EDITOR") or os.getenv("EDITOR") or DEFAULT_EDITOR
        )

        # Calendar
        self.HABITCTL_TIMEZONE: Optional[str] = os.getenv("HABITCTL_TIMEZONE") or None

        # Report windows
        self.HABITCTL_HISTORY_DAYS: int = _int_env("HABITCTL_HISTORY_DAYS", 100)
        self.HABITCTL_CONTEXT_DAYS: int = _int_env("HABITCTL_CONTEXT_DAYS", 60)

        # Logging
        self.HABITCTL_LOG_LEVEL: str = os.getenv("HABITCTL_LOG_LEVEL", "WARNING").upper()

    @property
    def habits_file(self) -> Path:
        return self.HABITCTL_DIR / HABITS_FILENAME

    @property
    def log_file(self) -> Path:
        return self.HABITCTL_DIR / LOG_FILENAME

    @property
    def editor_command(self) -> str:
        return self.HABITCTL_EDITOR


def get_settings() -> Settings:
    """Build settings from the current environment"""
    return Settings()
