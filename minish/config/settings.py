"""
Configuration settings for the interpreter.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from minish.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Interpreter settings loaded from environment variables."""

    def __init__(
        self,
        prompt: Optional[str] = None,
        log_level: Optional[str] = None,
        log_file: Optional[str] = None,
    ):
        self.prompt: str = (
            prompt if prompt is not None else self._get_env("MINISH_PROMPT", "$ ")
        )
        self.log_level: str = self._validate_log_level(
            log_level or self._get_env("MINISH_LOG_LEVEL", "WARNING")
        )
        self.log_file: Optional[str] = log_file or os.getenv("MINISH_LOG_FILE") or None

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _validate_log_level(self, value: str) -> str:
        """Normalize a level name, raise error if logging does not know it."""
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level {value!r}; expected one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)
