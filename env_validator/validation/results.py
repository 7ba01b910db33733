"""
Tagged result types returned by validation and typed access.

**Conceptual**: Neither validate_env_vars nor EnvConfig.get_parsed raises for
an expected failure. They return one of two variants that the caller inspects:

    outcome = validate_env_vars(["DATABASE_URL", "PORT"])
    if outcome.ok:
        config = outcome.config
    else:
        print(outcome.error)

Each variant also has unwrap(), which returns the success value or raises the
carried error, for callers who prefer exception flow at startup.

Equality compares contents, so two validations of the same names against the
same environment produce equal outcomes.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from env_validator.validation.errors import ConfigError, EnvAccessError

if TYPE_CHECKING:
    from env_validator.validation.accessor import EnvConfig


@dataclass(frozen=True)
class Success:
    """Validation passed; carries the populated accessor."""
    config: "EnvConfig"

    ok = True

    def unwrap(self) -> "EnvConfig":
        return self.config


@dataclass(frozen=True, eq=False)
class Failure:
    """Validation failed; carries the aggregate ConfigError."""
    error: ConfigError

    ok = False

    def unwrap(self) -> "EnvConfig":
        raise self.error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure):
            return NotImplemented
        return (
            self.error.missing == other.error.missing
            and self.error.invalid == other.error.invalid
        )

    def __hash__(self) -> int:
        return hash((self.error.missing, self.error.invalid))


ValidationOutcome = Union[Success, Failure]


@dataclass(frozen=True)
class Parsed:
    """Typed access succeeded; carries the converted value."""
    value: Any

    ok = True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True, eq=False)
class ParseFailed:
    """Typed access failed; carries a KeyNotFoundError or ParseError."""
    error: EnvAccessError

    ok = False

    def unwrap(self) -> Any:
        raise self.error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseFailed):
            return NotImplemented
        return (
            type(self.error) is type(other.error)
            and self.error.key == other.error.key
            and self.error.reason == other.error.reason
        )

    def __hash__(self) -> int:
        return hash((type(self.error), self.error.key, self.error.reason))


ParseResult = Union[Parsed, ParseFailed]
