"""
Immutable accessor over validated environment variables.

**Conceptual**: EnvConfig is what a successful validation hands back. It is a
snapshot: the values are copied out of the environment at validation time, so
later changes to os.environ (or to the mapping passed to the validator) do not
affect it. It has no mutation operations and no reference back to the
validator or loader, so one instance can be shared freely between threads.

**Two ways to read a value**:
  - get(key): raw string, or None if the key was not validated. Callers handle
    the absent case themselves.
  - get_parsed(key, target): converts the string using the target type's
    textual rules (see env_validator.utils.parsing) and returns a tagged
    result. This is the only place type checking happens; validation itself
    only checks presence.

**Example**:
    >>> outcome = validate_env_vars(["DATABASE_URL", "PORT"])
    >>> config = outcome.unwrap()
    >>> config.get("DATABASE_URL")
    'postgres://localhost/app'
    >>> config.get_parsed("PORT", U16)
    Parsed(value=8080)
    >>> port = config.require_parsed("PORT", U16)
"""

from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

from env_validator.utils.parsing import parse_value
from env_validator.validation.errors import KeyNotFoundError, ParseError
from env_validator.validation.results import ParseFailed, ParseResult, Parsed


class EnvConfig:
    """
    Read-only snapshot of validated variable names and their raw values.

    Attributes:
        names: Validated variable names, in insertion order.
    """

    __slots__ = ("_vars",)

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        """
        Create a snapshot of the given values.

        Args:
            values: Name -> raw string mapping. Copied; the caller's mapping
                   is not retained.
        """
        object.__setattr__(self, "_vars", MappingProxyType(dict(values or {})))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("EnvConfig is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("EnvConfig is immutable")

    @property
    def names(self) -> tuple:
        return tuple(self._vars)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Return the raw value for key, or default if key was not validated.

        Values are returned exactly as they were read: surrounding whitespace
        is not trimmed.
        """
        return self._vars.get(key, default)

    def get_parsed(self, key: str, target: Any) -> ParseResult:
        """
        Look up key and convert its value to the target type.

        **Failure modes** (returned, never raised):
          - KeyNotFoundError: key was not part of the validated set.
          - ParseError: value exists but cannot be converted.

        Args:
            key: Variable name.
            target: Type descriptor (U16, I64, int, float, bool, str, or a
                   callable such as pathlib.Path).

        Returns:
            Parsed(value) on success, ParseFailed(error) otherwise.

        Example:
            >>> config.get_parsed("PORT", U16)
            Parsed(value=8080)
            >>> config.get_parsed("PORT", bool).error.reason
            'provided string was not `true` or `false`'
        """
        raw = self._vars.get(key)
        if raw is None:
            return ParseFailed(KeyNotFoundError(key))

        try:
            return Parsed(parse_value(raw, target))
        except ValueError as e:
            return ParseFailed(ParseError(key=key, target=target, value=raw, reason=str(e)))

    def require_parsed(self, key: str, target: Any) -> Any:
        """
        Like get_parsed, but return the value directly.

        Raises:
            KeyNotFoundError: If key was not validated.
            ParseError: If the value cannot be converted.
        """
        return self.get_parsed(key, target).unwrap()

    def as_dict(self) -> Dict[str, str]:
        """Return a fresh, mutable copy of the validated values."""
        return dict(self._vars)

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnvConfig):
            return NotImplemented
        return dict(self._vars) == dict(other._vars)

    def __hash__(self) -> int:
        return hash(frozenset(self._vars.items()))

    def __repr__(self) -> str:
        # Values are often secrets; show names only
        return f"EnvConfig(names={list(self._vars)!r})"
