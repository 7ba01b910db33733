"""
Typed parsing of environment variable text.

**Conceptual**: Environment variables are always strings. A caller that needs a
port number or a feature flag asks for the value "as" some target type, and
this module converts the text using that type's textual rules. Conversion is
deferred until the value is actually requested; nothing here runs during
validation.

**Target type descriptors**:
  - IntegerType constants (U8, U16, U32, U64, USIZE, I8, I16, I32, I64, ISIZE):
    fixed-width integers with range checks.
  - int: same digit grammar as IntegerType, without a range limit.
  - float: decimal or scientific notation, "inf" and "nan" accepted.
  - bool: exactly "true" or "false".
  - str: the text unchanged.
  - Any other callable taking one string (pathlib.Path, decimal.Decimal, ...):
    its ValueError/TypeError/ArithmeticError becomes a parse failure.

**Strictness**: Surrounding whitespace and digit-group underscores are rejected
for numeric types even though Python's int()/float() would accept them.
" 8080" in an env file is almost always a typo and is reported as such.

**Example**:
    >>> parse_value("8080", U16)
    8080
    >>> parse_value("70000", U16)
    Traceback (most recent call last):
    ...
    ValueError: number too large to fit in target type
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional


INVALID_DIGIT = "invalid digit found in string"
EMPTY_INTEGER = "cannot parse integer from empty string"
TOO_LARGE = "number too large to fit in target type"
TOO_SMALL = "number too small to fit in target type"
INVALID_FLOAT = "invalid float literal"
INVALID_BOOL = "provided string was not `true` or `false`"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class IntegerType:
    """
    Descriptor for a fixed-width integer target.

    Attributes:
        name: Short lowercase name ("u16", "i64", ...), used by the CLI.
        min_value: Smallest accepted value (inclusive).
        max_value: Largest accepted value (inclusive).
    """
    name: str
    min_value: int
    max_value: int

    @property
    def signed(self) -> bool:
        return self.min_value < 0

    def parse(self, text: str) -> int:
        """Parse text into an int within [min_value, max_value]."""
        # Unsigned types have no minus sign in their grammar, not even "-0"
        if text.startswith("-") and not self.signed:
            raise ValueError(INVALID_DIGIT)

        value = _parse_integer(text)
        if value > self.max_value:
            raise ValueError(TOO_LARGE)
        if value < self.min_value:
            raise ValueError(TOO_SMALL)
        return value

    def __repr__(self) -> str:
        return self.name.upper()


U8 = IntegerType("u8", 0, 2**8 - 1)
U16 = IntegerType("u16", 0, 2**16 - 1)
U32 = IntegerType("u32", 0, 2**32 - 1)
U64 = IntegerType("u64", 0, 2**64 - 1)
USIZE = IntegerType("usize", 0, 2**64 - 1)
I8 = IntegerType("i8", -(2**7), 2**7 - 1)
I16 = IntegerType("i16", -(2**15), 2**15 - 1)
I32 = IntegerType("i32", -(2**31), 2**31 - 1)
I64 = IntegerType("i64", -(2**63), 2**63 - 1)
ISIZE = IntegerType("isize", -(2**63), 2**63 - 1)


def _parse_integer(text: str) -> int:
    if text == "":
        raise ValueError(EMPTY_INTEGER)
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError(INVALID_DIGIT)
    return int(text)


def _parse_float(text: str) -> float:
    if text == "" or text != text.strip() or "_" in text:
        raise ValueError(INVALID_FLOAT)
    try:
        return float(text)
    except ValueError:
        raise ValueError(INVALID_FLOAT)


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(INVALID_BOOL)


_BUILTIN_PARSERS: Dict[Any, Callable[[str], Any]] = {
    int: _parse_integer,
    float: _parse_float,
    bool: _parse_bool,
    str: lambda text: text,
}

TYPE_NAMES: Dict[str, Any] = {
    descriptor.name: descriptor
    for descriptor in (U8, U16, U32, U64, USIZE, I8, I16, I32, I64, ISIZE)
}
TYPE_NAMES.update({"int": int, "float": float, "bool": bool, "str": str})


def type_name(target: Any) -> str:
    """Return a short display name for a target type descriptor."""
    if isinstance(target, IntegerType):
        return target.name
    return getattr(target, "__name__", repr(target))


def resolve_type_name(name: str) -> Optional[Any]:
    """
    Look up a target type descriptor by its short name.

    Args:
        name: "u16", "i64", "int", "float", "bool", "str", ... (case-insensitive).

    Returns:
        The descriptor, or None if the name is unknown.
    """
    return TYPE_NAMES.get(name.strip().lower())


def parse_value(text: str, target: Any) -> Any:
    """
    Convert text into a value of the requested target type.

    Args:
        text: Raw environment variable value.
        target: IntegerType constant, int, float, bool, str, or any callable
               that accepts one string argument.

    Returns:
        The converted value.

    Raises:
        ValueError: If the text cannot be converted. The message is the short
                   reason that ends up in ParseError.reason.
        TypeError: If target is not a descriptor or callable.
    """
    if isinstance(target, IntegerType):
        return target.parse(text)

    # Callable instances may be unhashable; only classes are looked up
    if isinstance(target, type) and target in _BUILTIN_PARSERS:
        return _BUILTIN_PARSERS[target](text)

    if not callable(target):
        raise TypeError(f"Unsupported parse target: {target!r}")

    try:
        return target(text)
    except (ValueError, TypeError, ArithmeticError) as e:
        reason = str(e) or type(e).__name__
        raise ValueError(reason) from e
