"""Display formatters for raw prescription quantities."""
import math
from typing import Any, Optional

from workout_blocks_api.interpretation.resolver import is_present
from workout_blocks_api.utils import is_number, number_text, text_of, to_number

EMPTY_VALUE = "—"


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def format_seconds_value(value: Any) -> Optional[str]:
    """90 -> '1m 30s', 120 -> '2m', 45 -> '45s', 0 -> '0s'; labels pass through."""
    if _is_empty(value):
        return None
    numeric = to_number(value)
    if numeric is not None:
        if numeric == 0:
            return "0s"
        minutes = math.floor(numeric / 60)
        seconds = numeric - minutes * 60
        if minutes > 0:
            return f"{minutes}m {number_text(seconds)}s" if seconds > 0 else f"{minutes}m"
        return f"{number_text(numeric)}s"
    return value if isinstance(value, str) else None


def format_minutes_value(value: Any) -> Optional[str]:
    if _is_empty(value):
        return None
    numeric = to_number(value)
    if numeric is not None:
        return f"{number_text(numeric)} min"
    return value if isinstance(value, str) else None


def format_numeric_value(value: Any) -> Optional[str]:
    if _is_empty(value):
        return None
    return text_of(value)


def format_weight(value: Any) -> Any:
    """Numbers are kilograms; anything else is already a label."""
    if _is_empty(value):
        return None
    if is_number(value):
        return f"{number_text(value)} kg"
    return value


def format_rest(value: Any) -> str:
    """Rest that must always be shown: a missing value renders as a dash."""
    if not is_present(value):
        return EMPTY_VALUE
    numeric = to_number(value)
    if numeric is not None:
        return f"{number_text(numeric)}s"
    return str(value)


def format_percentage(value: Any) -> Optional[str]:
    if not is_present(value):
        return None
    return f"{number_text(value)}%" if is_number(value) else str(value)


def format_reps(value: Any) -> Optional[str]:
    if not is_present(value):
        return None
    return f"{number_text(value)} reps" if is_number(value) else str(value)
