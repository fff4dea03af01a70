"""Configuration for the file uploader library."""

from .logging_config import (
    LogFormat,
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    setup_logging,
)
from .settings import FileUploaderSettings, get_settings

__all__ = [
    "LogFormat",
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "setup_logging",
    "FileUploaderSettings",
    "get_settings",
]
