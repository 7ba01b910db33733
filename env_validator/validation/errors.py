"""
Error types for environment validation and typed access.

**Conceptual**: Two families of problems can occur, at two different times:
  1. Presence problems, found by the validator before the application starts.
     A required variable is either absent (MissingVariable) or set to an
     empty/whitespace-only value (EmptyVariable). All of them are collected
     into one ConfigError so the operator sees every problem in one pass.
  2. Access problems, found later when a caller asks the accessor for a typed
     value. The key was never validated (KeyNotFoundError) or its text cannot
     be converted (ParseError). These are reported one key at a time.

**Rendering**: str(ConfigError) produces the multi-line report printed by the
check_env action:

    Configuration validation failed:
    Missing required environment variables:
      - API_KEY
      - PORT (empty)
    Invalid environment variables:
      - MAX_CONNECTIONS: invalid digit found in string
"""

from dataclasses import dataclass
from typing import Any, Iterable, Tuple, Union

from env_validator.utils.parsing import type_name


class EnvValidatorError(Exception):
    """
    Base exception for everything raised by env_validator.

    Callers can catch EnvValidatorError to handle all library errors, or the
    specific subclasses for fine-grained handling.
    """
    pass


@dataclass(frozen=True)
class MissingVariable:
    """A required variable that is not set at all."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class EmptyVariable:
    """
    A required variable that is set but holds only whitespace.

    Renders as "<name> (empty)" so the report distinguishes it from a variable
    that is not set at all.
    """
    name: str

    def __str__(self) -> str:
        return f"{self.name} (empty)"


MissingEntry = Union[MissingVariable, EmptyVariable]


@dataclass(frozen=True)
class InvalidVariable:
    """A variable whose value was present but failed a type conversion."""
    name: str
    reason: str

    def __str__(self) -> str:
        return f"{self.name}: {self.reason}"


class ConfigError(EnvValidatorError):
    """
    Aggregate report of every problem found with the environment.

    **Conceptual**: The validator never raises this; it returns it inside a
    Failure outcome. It is still an Exception so callers can raise it (see
    Failure.unwrap) and let it propagate to the top of a startup script.

    Attributes:
        missing: Tagged entries for variables that were absent or empty,
                in the order they were requested.
        invalid: Variables that failed a later type conversion. The validator
                always leaves this empty; see from_parse_failures.
    """

    def __init__(
        self,
        missing: Iterable[MissingEntry] = (),
        invalid: Iterable[InvalidVariable] = (),
    ):
        self.missing: Tuple[MissingEntry, ...] = tuple(missing)
        self.invalid: Tuple[InvalidVariable, ...] = tuple(invalid)
        super().__init__(self.render())

    @classmethod
    def from_parse_failures(cls, failures: Iterable["EnvAccessError"]) -> "ConfigError":
        """
        Build a ConfigError whose invalid section lists the given access errors.

        Used to report several typed-access problems in the same format as
        presence problems, e.g. after checking every --parse entry in the
        check_env action.

        Args:
            failures: KeyNotFoundError / ParseError instances.

        Returns:
            ConfigError with an empty missing section.
        """
        invalid = [InvalidVariable(name=f.key, reason=f.reason) for f in failures]
        return cls(missing=(), invalid=invalid)

    @property
    def missing_vars(self) -> Tuple[str, ...]:
        """Missing entries as rendered strings ("NAME" or "NAME (empty)")."""
        return tuple(str(entry) for entry in self.missing)

    @property
    def invalid_vars(self) -> Tuple[Tuple[str, str], ...]:
        """Invalid entries as (name, reason) pairs."""
        return tuple((entry.name, entry.reason) for entry in self.invalid)

    def render(self) -> str:
        """Render the human-readable report (header, missing, then invalid)."""
        lines = ["Configuration validation failed:"]

        if self.missing:
            lines.append("Missing required environment variables:")
            for entry in self.missing:
                lines.append(f"  - {entry}")

        if self.invalid:
            lines.append("Invalid environment variables:")
            for entry in self.invalid:
                lines.append(f"  - {entry}")

        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ConfigError(missing={self.missing!r}, invalid={self.invalid!r})"


class EnvAccessError(EnvValidatorError):
    """
    Base exception for typed-access failures on a validated EnvConfig.

    Attributes:
        key: Variable name that was requested.
        reason: Short human-readable cause, used in ConfigError reports.
    """

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(reason)


class KeyNotFoundError(EnvAccessError):
    """Raised (or returned) when the key was not part of the validated set."""

    def __init__(self, key: str):
        super().__init__(key, f"Key '{key}' not found")


class ParseError(EnvAccessError):
    """
    Raised (or returned) when a stored value cannot be converted.

    Attributes:
        target: The type descriptor the caller asked for.
        value: The raw text that failed to convert.
    """

    def __init__(self, key: str, target: Any, value: str, reason: str):
        self.target = target
        self.value = value
        super().__init__(key, reason)

    def __str__(self) -> str:
        return f"Failed to parse {self.key} as {type_name(self.target)}: {self.reason}"
