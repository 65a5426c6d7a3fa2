"""
Notes Parser

Last-resort recovery of drop-set entries from coach notes, for blocks that
carry no structured drop data at all. Output entries have the same shape as
normalized structured entries.
"""

import re
from typing import Any, List

from workout_blocks_api.interpretation.resolver import pick_value
from workout_blocks_api.models import DropSetEntry

LINE_SPLIT_PATTERN = re.compile(r'\n|,')
PERCENTAGE_PATTERN = re.compile(r'(-?\d+\.?\d*)%')  # "-10%", "20%", "12.5%"
REPS_PATTERN = re.compile(r'(\d+)\s*(reps?|x)', re.IGNORECASE)  # "8 reps", "6x"
LEADING_BULLET_PATTERN = re.compile(r'^[\s\-•–—*]+')


def parse_drop_sets_from_notes(notes: Any) -> List[DropSetEntry]:
    """
    Extract drop entries from free text.

    Only lines mentioning a percentage are considered. Lines where neither the
    percentage nor the reps can be read still become entries so the coach's
    wording is not lost.
    """
    if not isinstance(notes, str) or not notes.strip():
        return []

    lines = [line.strip() for line in LINE_SPLIT_PATTERN.split(notes)]
    candidates = [line for line in lines if line and "%" in line]

    entries = []
    for line in candidates:
        percentage_match = PERCENTAGE_PATTERN.search(line)
        reps_match = REPS_PATTERN.search(line)
        label = LEADING_BULLET_PATTERN.sub("", line).strip()
        entries.append(DropSetEntry(
            percentage=f"{percentage_match.group(1)}%" if percentage_match else None,
            reps=f"{reps_match.group(1)} reps" if reps_match else None,
            label=label or None,
        ))
    return entries


def normalize_drop_sets(raw: Any) -> List[DropSetEntry]:
    """Normalize a structured drop list whose entry keys vary by authoring era."""
    if not isinstance(raw, (list, tuple)):
        return []
    entries = []
    for entry in raw:
        entry = entry if isinstance(entry, dict) else {}
        label = pick_value(entry.get("label"), entry.get("name"))
        entries.append(DropSetEntry(
            percentage=pick_value(
                entry.get("percentage"),
                entry.get("drop_percentage"),
                entry.get("weight_reduction_percentage"),
                entry.get("weight_change"),
            ),
            reps=pick_value(
                entry.get("reps"),
                entry.get("target_reps"),
                entry.get("rep_count"),
            ),
            label=str(label) if label is not None else None,
        ))
    return entries
