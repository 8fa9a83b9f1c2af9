"""Logging configuration for applications embedding instref.

Pure configuration data plus one function that applies it. Library modules
only call logging.getLogger(__name__); handlers are installed here, by the
application, never on import.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import final

from instref.core.result import Err, Ok

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@final
@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Root logger level and record format."""

    level: str = "INFO"
    fmt: str = DEFAULT_LOG_FORMAT

    def __post_init__(self) -> None:
        if self.level not in LOG_LEVELS:
            raise TypeError(f"LoggingConfig.level must be one of {LOG_LEVELS}, got {self.level!r}")

    @staticmethod
    def create(level: str, fmt: str = DEFAULT_LOG_FORMAT) -> Ok[LoggingConfig] | Err[str]:
        """Case-insensitive on level name."""
        normalized = level.upper()
        if normalized not in LOG_LEVELS:
            return Err(f"LoggingConfig.level: unknown level '{level}'")
        return Ok(LoggingConfig(level=normalized, fmt=fmt))

    @property
    def numeric_level(self) -> int:
        return logging.getLevelNamesMapping()[self.level]


DEFAULT_LOGGING_CONFIG = LoggingConfig()


def configure_logging(config: LoggingConfig = DEFAULT_LOGGING_CONFIG) -> None:
    logging.basicConfig(level=config.numeric_level, format=config.fmt, force=True)
