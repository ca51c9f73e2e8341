"""Casting rules shared by the required and optional accessor families.

Each caster takes the variable name (for error messages) and the raw string
value, and either returns the cast value or raises ``EnvError``. Nothing here
reads the environment.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from decimal import Decimal

from typedenv.errors import not_a_number, not_allowed, not_an_int

DEFAULT_SEPARATOR = ","

BOOL_VALUES: tuple[str, ...] = (
    "0",
    "1",
    "false",
    "true",
    "False",
    "True",
    "FALSE",
    "TRUE",
)
TRUE_VALUES = frozenset({"1", "true", "True", "TRUE"})

# Plain ASCII decimal literals only: no "1_000", no non-ASCII digits, no "inf"/"nan".
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", flags=re.ASCII)

# Same bound as the interpreter's default int <-> str conversion limit.
_MAX_INT_DIGITS = 4300


def to_integer(key: str, raw: str) -> int:
    """Parse *raw* as a number that has no fractional part.

    "42", "42.0", "-7" and "1e3" pass; "45.7", "", "nan" and "hello" do not.
    """
    text = raw.strip()
    if not _DECIMAL_RE.fullmatch(text):
        raise not_an_int(key)
    parsed = Decimal(text)

    if parsed.is_zero():
        return 0
    if not parsed.is_finite() or parsed.adjusted() > _MAX_INT_DIGITS:
        raise not_an_int(key)
    if parsed != parsed.to_integral_value():
        raise not_an_int(key)
    return int(parsed)


def to_number(key: str, raw: str) -> float:
    """Parse *raw* as a finite float."""
    text = raw.strip()
    if not _DECIMAL_RE.fullmatch(text):
        raise not_a_number(key)
    parsed = float(text)

    if not math.isfinite(parsed):
        raise not_a_number(key)
    return parsed


def allowed_values(allowed: Iterable[str]) -> list[str]:
    """Materialize an allowed-values argument (list, tuple, StrEnum class...)."""
    values = list(allowed)
    if not values:
        raise ValueError("allowed values must not be empty")
    return values


def check_allowed(key: str, raw: str, allowed: Iterable[str]) -> str:
    values = allowed_values(allowed)
    if raw not in values:
        raise not_allowed(key, values)
    return raw


def to_boolean(key: str, raw: str) -> bool:
    """Accept exactly the literals in BOOL_VALUES."""
    return check_allowed(key, raw, BOOL_VALUES) in TRUE_VALUES


def check_separator(separator: str) -> None:
    if not separator:
        raise ValueError("separator must not be empty")


def split(raw: str, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    check_separator(separator)
    return raw.split(separator)
