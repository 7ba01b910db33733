"""
Presence validation of required environment variables.

**Conceptual**: An application declares the variables it cannot start without.
validate_env_vars() checks each one and returns either:
  - Success(EnvConfig) holding every requested value, or
  - Failure(ConfigError) listing every variable that was missing or empty.

It is all-or-nothing: one missing variable fails the whole call and no
EnvConfig is produced. Problems are collected exhaustively rather than
stopping at the first one, so the operator can fix the environment in a
single pass.

**Where values come from**:
  - environ=None (default): the .env file is merged into os.environ first
    (unless disabled via argument or ENV_VALIDATOR_LOAD_DOTENV), then
    os.environ is read.
  - environ=<mapping>: only that mapping is read and nothing is loaded or
    mutated. Pair it with build_environment() for a pure validation.

**Rules per name** (in the order given):
  - not set -> MissingVariable(name)
  - set to "" or whitespace only -> EmptyVariable(name)
  - otherwise the value is kept exactly as read (not trimmed)

Duplicate names are checked independently and not deduplicated: a missing
name listed twice is reported twice. Only presence is checked here; type
conversion is deferred to EnvConfig.get_parsed().

**Usage example**:
    >>> outcome = validate_env("DATABASE_URL", "PORT", "API_KEY")
    >>> if not outcome.ok:
    ...     print(outcome.error)
    Configuration validation failed:
    Missing required environment variables:
      - API_KEY
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Union

from env_validator.config.settings import get_settings
from env_validator.sources.dotenv_loader import load_dotenv_file
from env_validator.utils.logger import get_logger
from env_validator.validation.accessor import EnvConfig
from env_validator.validation.errors import (
    ConfigError,
    EmptyVariable,
    MissingEntry,
    MissingVariable,
)
from env_validator.validation.results import Failure, Success, ValidationOutcome


logger = get_logger(__name__)


def _read_environment(
    environ: Optional[Mapping[str, str]],
    load_dotenv: Optional[bool],
    dotenv_path: Optional[Union[str, Path]],
) -> Mapping[str, str]:
    if environ is not None:
        return environ

    settings = get_settings()

    should_load = settings.load_dotenv if load_dotenv is None else load_dotenv
    if should_load:
        load_dotenv_file(dotenv_path if dotenv_path is not None else settings.dotenv_path)

    return dict(os.environ)


def validate_env_vars(
    required: Iterable[str],
    *,
    environ: Optional[Mapping[str, str]] = None,
    load_dotenv: Optional[bool] = None,
    dotenv_path: Optional[Union[str, Path]] = None,
) -> ValidationOutcome:
    """
    Check that every required variable is set to a non-blank value.

    Args:
        required: Variable names (any iterable), in the order they should be
                 reported.
        environ: Mapping to read instead of os.environ. When given, no .env
                file is loaded and load_dotenv/dotenv_path are ignored.
        load_dotenv: Override ENV_VALIDATOR_LOAD_DOTENV for this call.
        dotenv_path: Override ENV_VALIDATOR_DOTENV_PATH for this call.

    Returns:
        Success(EnvConfig) if nothing is missing, else Failure(ConfigError).
        Validation problems are never raised.

    Raises:
        TypeError: If required is a single string instead of a sequence of
                  names (a programming error, not a validation failure).
        ValueError: If environ is None and the ENV_VALIDATOR_* settings are
                   themselves invalid.

    Example:
        >>> validate_env_vars(["PORT"], environ={"PORT": "8080"})
        Success(config=EnvConfig(names=['PORT']))
        >>> validate_env_vars(["PORT"], environ={"PORT": "  "}).error.missing_vars
        ('PORT (empty)',)
    """
    if isinstance(required, str):
        raise TypeError(
            "required must be a sequence of variable names, not a single string; "
            f"did you mean [{required!r}]?"
        )
    # Any iterable of names, generators included
    required = list(required)

    env = _read_environment(environ, load_dotenv, dotenv_path)

    missing: List[MissingEntry] = []
    values: Dict[str, str] = {}

    for name in required:
        value = env.get(name)
        if value is None:
            missing.append(MissingVariable(name))
        elif not value.strip():
            missing.append(EmptyVariable(name))
        else:
            values[name] = value

    if missing:
        logger.info(
            "Environment validation failed: %d of %d required variable(s) missing: %s",
            len(missing),
            len(required),
            ", ".join(str(entry) for entry in missing),
        )
        return Failure(ConfigError(missing=missing))

    logger.debug("Environment validation passed for %d variable(s)", len(values))
    return Success(EnvConfig(values))


def validate_env(*names: str, **kwargs) -> ValidationOutcome:
    """
    Variadic shorthand for validate_env_vars().

    Example:
        >>> config = validate_env("DATABASE_URL", "PORT").unwrap()

    Args:
        *names: One or more variable names.
        **kwargs: Passed through to validate_env_vars (environ, load_dotenv,
                 dotenv_path).

    Raises:
        TypeError: If no names are given.
    """
    if not names:
        raise TypeError("validate_env() requires at least one variable name")
    return validate_env_vars(list(names), **kwargs)
