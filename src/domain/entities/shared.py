"""Shared utilities and helper functions for domain entities.

Pure coercion helpers used wherever loosely-shaped track data crosses into the
domain. None of them raise: malformed values collapse to "absent".
"""

from collections.abc import Mapping
from typing import Any

MAX_YEAR_DIGITS = 9


def read_field(source: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-bearing object."""
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def coerce_text(value: Any) -> str:
    """Return the value if it is a string, otherwise an empty string."""
    return value if isinstance(value, str) else ""


def coerce_year(value: Any) -> int | None:
    """Coerce a release year to int, accepting ints, whole floats and digit strings."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        digits = value.strip()
        # ASCII digits only; bounded so int() never hits the digit limit
        if digits.isascii() and digits.isdigit() and len(digits) <= MAX_YEAR_DIGITS:
            return int(digits)
    return None


def coerce_number(value: Any) -> int | float | None:
    """Return ints and floats unchanged; anything else (bools included) is absent."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return value
