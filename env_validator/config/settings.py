"""
Settings for env_validator itself.

**Conceptual**: The library validates other applications' environment
variables, but a few knobs of its own are read from the environment too:
whether the ambient validation path loads a .env file first, where that file
lives, and how chatty the logger is. They are loaded once into a frozen
dataclass and validated upfront, so a typo such as
ENV_VALIDATOR_LOG_LEVEL=VERBSE fails immediately with a clear message.

**Environment variables**:
  - ENV_VALIDATOR_LOAD_DOTENV (optional): "true"/"false" (default "true").
  - ENV_VALIDATOR_DOTENV_PATH (optional): explicit .env file path. Defaults to
    searching upward from the working directory.
  - ENV_VALIDATOR_LOG_LEVEL (optional): DEBUG, INFO, WARNING, ERROR or
    CRITICAL (default WARNING).

Tests should construct ValidatorSettings directly, or call reset_settings()
after changing the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class ValidatorSettings:
    """
    Configuration for env_validator.

    Attributes:
        load_dotenv: Whether validate_env_vars merges a .env file into the
                    process environment before reading it (ambient path only).
        dotenv_path: Explicit .env location, or None to search from the
                    working directory.
        log_level: Level name applied to the "env_validator" logger.
    """
    load_dotenv: bool = True
    dotenv_path: Optional[Path] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"ENV_VALIDATOR_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                f"got: {self.log_level}"
            )

    @classmethod
    def from_env(cls) -> "ValidatorSettings":
        """
        Load settings from environment variables.

        Returns:
            ValidatorSettings with values from the environment, defaults
            elsewhere.

        Raises:
            ValueError: If ENV_VALIDATOR_LOG_LEVEL is not a known level.

        Usage example:
            >>> # ENV_VALIDATOR_LOAD_DOTENV=false
            >>> settings = ValidatorSettings.from_env()
            >>> settings.load_dotenv
            False
        """
        load_dotenv = os.getenv("ENV_VALIDATOR_LOAD_DOTENV", "true").lower() in _TRUE_VALUES
        dotenv_str = os.getenv("ENV_VALIDATOR_DOTENV_PATH", "")
        log_level = os.getenv("ENV_VALIDATOR_LOG_LEVEL", "WARNING").strip().upper()

        return cls(
            load_dotenv=load_dotenv,
            dotenv_path=Path(dotenv_str) if dotenv_str else None,
            log_level=log_level,
        )


_default_settings: Optional[ValidatorSettings] = None


def get_settings() -> ValidatorSettings:
    """
    Get the settings singleton, loading it from the environment on first call.

    Raises:
        ValueError: If the environment holds an invalid setting.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = ValidatorSettings.from_env()

    return _default_settings


def reset_settings():
    """
    Clear the cached settings so the next get_settings() re-reads the environment.

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("ENV_VALIDATOR_LOAD_DOTENV", "false")
          reset_settings()
          assert get_settings().load_dotenv is False
      ```
    """
    global _default_settings
    _default_settings = None
