"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from file_agent.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_ROOT_DIR = "testDir"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.root_dir: str = self._get_env("FILE_AGENT_ROOT", DEFAULT_ROOT_DIR)
        self.log_level: int = self._get_log_level("FILE_AGENT_LOG_LEVEL", "WARNING")
        self.random_seed: Optional[int] = self._get_optional_int("FILE_AGENT_SEED")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level name from the environment, raise error if unknown."""
        name = self._get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Invalid log level in {key}: {name}")
        return level

    def _get_optional_int(self, key: str) -> Optional[int]:
        """Get an optional integer environment variable."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return None
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {value!r}")
