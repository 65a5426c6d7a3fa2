"""Utility functions."""
import json
import logging
import math
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

Number = Union[int, float]


def safe_parse(value: Any) -> Any:
    """Parse a JSON-ish bag column.

    Mappings come back as-is. Strings are parsed only when they look like JSON
    (start with '{' or '['); free text such as "test" yields {}.
    """
    if not value:
        return {}
    if isinstance(value, str):
        trimmed = value.strip()
        if not trimmed.startswith(("{", "[")):
            return {}
        try:
            return json.loads(trimmed)
        except ValueError:
            logger.warning(f"Failed to parse JSON value: {trimmed[:80]!r}")
            return {}
    if isinstance(value, dict):
        return value
    return {}


def as_mapping(value: Any) -> Dict[str, Any]:
    """Like safe_parse, but anything that is not an object becomes {}."""
    parsed = safe_parse(value)
    return dict(parsed) if isinstance(parsed, dict) else {}


def to_number(value: Any) -> Optional[Number]:
    """Convert a number or numeric string to a finite number, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        # Ints past float range are treated as unreadable
        try:
            float(value)
        except OverflowError:
            return None
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = float(text)
        except ValueError:
            return None
        if not math.isfinite(parsed):
            return None
        return int(parsed) if parsed.is_integer() else parsed
    return None


def is_number(value: Any) -> bool:
    """True for real numbers (bools excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    """A real number that fits in a float and is finite."""
    return is_number(value) and to_number(value) is not None


def number_text(value: Number) -> str:
    """Render a number the way a coach would write it: 8.0 -> '8', 2.5 -> '2.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def text_of(value: Any) -> str:
    """Stringify a resolved value for display."""
    if is_number(value):
        return number_text(value)
    return str(value)
