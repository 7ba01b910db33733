#!/usr/bin/env python3
"""
Pre-flight check of required environment variables.

**Purpose**: Run this before starting a service (in a container entrypoint,
a CI job, or by hand) to confirm every variable it needs is set. All problems
are reported at once, in the same format the library uses.

**What it does**:
  1. Loads the .env file (unless --no-dotenv), without overriding variables
     that are already set
  2. Checks that each named variable is set and not blank
  3. Optionally checks that selected variables parse as a type (--parse)
  4. Prints a report and exits with a status code

**Usage**:
    From project root:
    ```bash
    python actions/check_env.py DATABASE_URL PORT API_KEY --parse PORT:u16
    ```

**Example output**:
    $ python actions/check_env.py DATABASE_URL PORT API_KEY
    Configuration validation failed:
    Missing required environment variables:
      - API_KEY

**Exit codes**:
  - 0: All variables present (and parseable, if --parse was given)
  - 1: Missing, empty or unparseable variables
  - 2: Bad command line (unknown type name, malformed --parse entry) or
       invalid ENV_VALIDATOR_* settings
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

# Add project root to Python path so we can import env_validator
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from env_validator.config.settings import get_settings
from env_validator.utils.logger import configure_root_logger
from env_validator.utils.parsing import TYPE_NAMES, resolve_type_name, type_name
from env_validator.validation.errors import ConfigError
from env_validator.validation.validator import validate_env_vars


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        Namespace with attributes: names (list), env_file (str or None),
        no_dotenv (bool), parse (list of "NAME:TYPE"), show_values (bool).
    """
    parser = argparse.ArgumentParser(
        description="Check that required environment variables are set",
        epilog=f"""
Examples:
  # Check presence only
  python actions/check_env.py DATABASE_URL PORT API_KEY

  # Also check that PORT is a valid port number
  python actions/check_env.py DATABASE_URL PORT --parse PORT:u16

  # Use a specific env file
  python actions/check_env.py PORT --env-file config/staging.env

Types: {", ".join(sorted(TYPE_NAMES))}
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "names",
        nargs="+",
        help="One or more required variable names (e.g., DATABASE_URL PORT)",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        help="Path to the .env file (default: search upward from the working directory)",
        default=None,
    )

    parser.add_argument(
        "--no-dotenv",
        action="store_true",
        help="Do not load any .env file; check the process environment only",
    )

    parser.add_argument(
        "--parse",
        action="append",
        default=[],
        metavar="NAME:TYPE",
        help="Also check that NAME parses as TYPE (repeatable)",
    )

    parser.add_argument(
        "--show-values",
        action="store_true",
        help="Print values on success (default: masked)",
    )

    return parser.parse_args(argv)


def parse_type_checks(entries: Sequence[str]) -> List[Tuple[str, object]]:
    """
    Turn "NAME:TYPE" entries into (name, type descriptor) pairs.

    Raises:
        ValueError: If an entry is malformed or names an unknown type.
    """
    checks = []
    for entry in entries:
        name, sep, type_str = entry.partition(":")
        if not sep or not name or not type_str:
            raise ValueError(f"--parse expects NAME:TYPE, got: {entry!r}")

        target = resolve_type_name(type_str)
        if target is None:
            raise ValueError(
                f"Unknown type {type_str!r} for {name}; expected one of: "
                f"{', '.join(sorted(TYPE_NAMES))}"
            )
        checks.append((name, target))
    return checks


def mask_value(value: str) -> str:
    """Hide all but the first two characters of a value."""
    if len(value) <= 2:
        return "*" * len(value)
    return value[:2] + "*" * min(len(value) - 2, 8)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the check and return the process exit code.

    **Flow**: parse args → validate presence → check --parse types → report.
    Presence failures are reported before any type check runs, since typed
    access needs a validated EnvConfig.
    """
    args = parse_args(argv)

    try:
        configure_root_logger(get_settings().log_level)
        checks = parse_type_checks(args.parse)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # Names only given via --parse are required too
    required = list(args.names)
    for name, _ in checks:
        if name not in required:
            required.append(name)

    outcome = validate_env_vars(
        required,
        load_dotenv=not args.no_dotenv,
        dotenv_path=args.env_file,
    )
    if not outcome.ok:
        print(outcome.error, end="", file=sys.stderr)
        return 1

    config = outcome.config

    failures = []
    for name, target in checks:
        result = config.get_parsed(name, target)
        if not result.ok:
            failures.append(result.error)

    if failures:
        print(ConfigError.from_parse_failures(failures), end="", file=sys.stderr)
        return 1

    for name in required:
        value = config.get(name)
        shown = value if args.show_values else mask_value(value)
        print(f"  ✓ {name}={shown}")

    for name, target in checks:
        print(f"  ✓ {name} parses as {type_name(target)}")

    print(f"Done! {len(required)} variable(s) OK.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
