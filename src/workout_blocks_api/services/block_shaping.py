"""Shape persisted workout block rows into Block records for interpretation.

Rows come straight from the program tables: JSON columns may be strings,
placeholder text ("test") leaks into names and notes, and canonical exercise
fields fall back to the block's flat columns.
"""

import logging
import math
from typing import Any, Dict, List, Mapping, Optional

from workout_blocks_api.models import Block, Exercise
from workout_blocks_api.utils import as_mapping, is_finite_number, is_number, number_text

logger = logging.getLogger(__name__)

PLACEHOLDER_VALUES = {"test", "teest"}

# Block types limited to their first two exercises (isolation, then compound).
PAIRED_BLOCK_TYPES = {"pre_exhaustion": 2}

ExerciseCatalog = Mapping[Any, Mapping[str, Any]]


def filter_test_value(value: Any) -> Optional[str]:
    """Trimmed text, or None for blanks and placeholder values."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if not trimmed or trimmed.lower() in PLACEHOLDER_VALUES:
        return None
    return trimmed


def _first_not_none(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def _order_index(value: Any, position: int) -> int:
    """Zero-based order from a 1-based exercise_order, else the row position."""
    order = value if is_finite_number(value) else position + 1
    return max(0, int(order) - 1)


def _weight_guidance(row: Mapping[str, Any]) -> Optional[str]:
    weight = row.get("weight_kg")
    if weight is not None:
        return f"{number_text(weight) if is_number(weight) else weight} kg"
    load = row.get("load_percentage")
    if load is not None:
        return f"{number_text(load) if is_number(load) else load}%"
    return None


def shape_exercise(
    row: Mapping[str, Any],
    block_row: Mapping[str, Any],
    catalog: Optional[ExerciseCatalog] = None,
    position: int = 0,
) -> Dict[str, Any]:
    """
    Shape one exercise row.

    Returns the exercise payload with its zero-based order index under
    "order_index" so the caller can sort before building the Block.
    """
    exercise_id = row.get("exercise_id")
    details = (catalog or {}).get(exercise_id) if isinstance(exercise_id, (str, int)) else None
    if not isinstance(details, Mapping):
        details = {}
    order_index = _order_index(row.get("exercise_order"), position)
    name = (
        filter_test_value(details.get("name"))
        or filter_test_value(row.get("exercise_letter"))
        or f"Exercise {order_index + 1}"
    )

    return {
        "order_index": order_index,
        "exercise": Exercise(
            id=row.get("id"),
            name=name,
            description=details.get("description") or "",
            sets=_first_not_none(row.get("sets"), block_row.get("total_sets")),
            reps=_first_not_none(row.get("reps"), block_row.get("reps_per_set")),
            rest_seconds=_first_not_none(row.get("rest_seconds"), block_row.get("rest_seconds")),
            weight_guidance=_weight_guidance(row),
            exercise_letter=row.get("exercise_letter"),
            notes=filter_test_value(row.get("notes")),
            raw=dict(row),
            meta=as_mapping(row.get("notes")),
        ),
    }


def shape_block(row: Mapping[str, Any], catalog: Optional[ExerciseCatalog] = None) -> Block:
    """Shape one persisted block row (with its nested exercise rows)."""
    exercise_rows = row.get("exercises")
    if not isinstance(exercise_rows, list):
        exercise_rows = []

    shaped = [
        shape_exercise(exercise_row, row, catalog, position)
        for position, exercise_row in enumerate(exercise_rows)
        if isinstance(exercise_row, Mapping)
    ]
    shaped.sort(key=lambda item: item["order_index"])
    exercises = [item["exercise"] for item in shaped]

    block_type = row.get("block_type")
    limit = PAIRED_BLOCK_TYPES.get(block_type) if isinstance(block_type, str) else None
    if limit is not None:
        exercises = [
            item["exercise"] for item in shaped if item["order_index"] < limit
        ][:limit]

    raw_block = dict(row)
    raw_block["time_protocols"] = row.get("time_protocols") or []

    return Block(
        id=row.get("id"),
        block_type=row.get("block_type"),
        block_name=row.get("block_name"),
        notes=filter_test_value(row.get("block_notes")),
        parameters=as_mapping(row.get("block_parameters")),
        raw_block=raw_block,
        exercises=exercises,
    )


def _block_order(row: Mapping[str, Any]) -> float:
    order = row.get("block_order")
    if is_finite_number(order):
        return order
    return math.inf


def shape_blocks(rows: List[Mapping[str, Any]], catalog: Optional[ExerciseCatalog] = None) -> List[Block]:
    """Shape block rows and sort them by block_order (unordered blocks last)."""
    valid = [row for row in rows if isinstance(row, Mapping)]
    if len(valid) != len(rows):
        logger.warning(f"Skipped {len(rows) - len(valid)} malformed block row(s)")
    ordered = sorted(valid, key=_block_order)
    return [shape_block(row, catalog) for row in ordered]
