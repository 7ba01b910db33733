"""
Loading variable definitions from a local .env file.

**Conceptual**: Developers keep local configuration in a KEY=VALUE .env file
that is never committed. Before validation, its definitions are made visible
alongside the real environment. Two ways are offered:

  1. load_dotenv_file(): merge the file into os.environ (process-wide).
     Variables already set in the environment win; the file only fills gaps.
     This is what validate_env_vars() does when no explicit mapping is given.

  2. build_environment(): return a fresh dict layering, from lowest to highest
     precedence, the .env file, a base mapping (os.environ by default) and
     caller overrides. os.environ is left untouched, so the result can be fed
     to validate_env_vars(environ=...) for a side-effect-free validation.

**Best effort**: A missing, unreadable or malformed .env file is never an
error or console output. The functions log at DEBUG and carry on with
whatever they could read. python-dotenv skips lines it cannot parse, and its
per-line warnings are muted while the file is read.

**File lookup**: Without an explicit path, ".env" is searched for in the
current working directory and then each parent directory.
"""

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, Union

from dotenv import dotenv_values, find_dotenv, load_dotenv

from env_validator.utils.logger import get_logger


DOTENV_FILENAME = ".env"

logger = get_logger(__name__)

PathLike = Union[str, Path]


@contextmanager
def _quiet_dotenv_parser() -> Iterator[None]:
    """Suppress python-dotenv's "could not parse statement" warnings while reading."""
    dotenv_logger = logging.getLogger("dotenv.main")
    previous = dotenv_logger.level
    dotenv_logger.setLevel(logging.CRITICAL + 1)
    try:
        yield
    finally:
        dotenv_logger.setLevel(previous)


def find_dotenv_path(dotenv_path: Optional[PathLike] = None) -> Optional[Path]:
    """
    Resolve which .env file to read.

    Args:
        dotenv_path: Explicit file path. If None, search upward from the
                    current working directory for ".env".

    Returns:
        Path to an existing file, or None if there is nothing to load.
    """
    if dotenv_path is not None:
        path = Path(dotenv_path)
        return path if path.is_file() else None

    found = find_dotenv(DOTENV_FILENAME, usecwd=True)
    return Path(found) if found else None


def load_dotenv_file(dotenv_path: Optional[PathLike] = None) -> bool:
    """
    Merge a .env file into os.environ without overriding existing variables.

    Idempotent: a second call re-reads the file but changes nothing, since
    every key it defines is already set.

    Args:
        dotenv_path: Explicit file path, or None to search from the working
                    directory.

    Returns:
        True if a file was found and read, False otherwise. Never raises for
        file problems.
    """
    path = find_dotenv_path(dotenv_path)
    if path is None:
        logger.debug("No .env file found; using process environment only")
        return False

    try:
        with _quiet_dotenv_parser():
            load_dotenv(dotenv_path=path, override=False)
    except (OSError, ValueError) as e:
        logger.debug("Ignoring unreadable .env file %s: %s", path, e)
        return False

    logger.debug("Loaded .env file %s", path)
    return True


def read_dotenv_values(dotenv_path: Optional[PathLike] = None) -> Dict[str, str]:
    """
    Read a .env file into a dict without touching os.environ.

    Keys declared without a value (a bare "KEY" line) are dropped.

    Returns:
        Name -> value mapping; empty if the file is missing or unreadable.
    """
    path = find_dotenv_path(dotenv_path)
    if path is None:
        return {}

    try:
        with _quiet_dotenv_parser():
            values = dotenv_values(dotenv_path=path)
    except (OSError, ValueError) as e:
        logger.debug("Ignoring unreadable .env file %s: %s", path, e)
        return {}

    return {key: value for key, value in values.items() if value is not None}


def build_environment(
    dotenv_path: Optional[PathLike] = None,
    *,
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
    use_dotenv: bool = True,
) -> Dict[str, str]:
    """
    Build an explicit environment snapshot for validation.

    **Precedence** (low -> high): .env file, base, overrides. This matches
    load_dotenv_file(), where already-set variables beat the file.

    Args:
        dotenv_path: Explicit .env path, or None to search from the working
                    directory.
        base: Base mapping. Defaults to a copy of os.environ.
        overrides: Values that win over everything else.
        use_dotenv: Set False to skip the .env file entirely.

    Returns:
        A new dict; later changes to it, or to os.environ, are independent.

    Example:
        >>> environ = build_environment(overrides={"PORT": "9000"})
        >>> outcome = validate_env_vars(["PORT"], environ=environ)
    """
    data: Dict[str, str] = {}

    if use_dotenv:
        data.update(read_dotenv_values(dotenv_path))

    data.update(os.environ if base is None else base)

    if overrides:
        data.update({key: str(value) for key, value in overrides.items()})

    return data
