"""
Settings and logging configuration for minnow scripts.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Settings:
    """Logging settings."""

    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(levelname)s - %(message)s"
    log_file: Optional[Path] = None

    @classmethod
    def default(cls) -> "Settings":
        return cls()


def init_logging(settings: Optional[Settings] = None) -> None:
    """Configure logging to the console and an optional file."""
    if settings is None:
        settings = Settings.default()

    handlers = [logging.StreamHandler()]
    if settings.log_file is not None:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=settings.log_level,
        format=settings.log_format,
        handlers=handlers,
        force=True,
    )

    logging.getLogger(__name__).info("Logging initialized at %s", settings.log_level)
