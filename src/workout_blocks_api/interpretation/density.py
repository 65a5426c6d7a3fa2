"""
Density Training Extractor

One extractor for the time-boxed family: density / density_training, AMRAP,
EMOM and for-time. All sub-types share a candidate pool; each shows its own
ordered subset of it.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from workout_blocks_api.interpretation import chains
from workout_blocks_api.interpretation.base import BlockExtractor, display_text
from workout_blocks_api.interpretation.formatters import (
    format_minutes_value,
    format_numeric_value,
    format_seconds_value,
)
from workout_blocks_api.interpretation.resolver import pick_value, resolve
from workout_blocks_api.models import Block, BlockDisplay, BreakdownEntry, DisplayField, Variant
from workout_blocks_api.utils import Number, to_number

logger = logging.getLogger(__name__)

# EMOM work and rest share one minute. The data model carries no interval length.
EMOM_INTERVAL_SECONDS = 60

DENSITY_DESCRIPTIONS: Dict[str, str] = {
    "density": "Accumulate quality reps within the prescribed time window.",
    "density_training": "Accumulate quality reps within the prescribed time window.",
    "amrap": "As many reps or rounds as possible within the allotted time.",
    "emom": "Complete the prescribed work every minute on the minute.",
    "for_time": "Finish all prescribed work as quickly as possible.",
}
DEFAULT_DESCRIPTION = "Follow the prescribed tempo and rest guidance for this interval."

RECOVERY_TIME_TYPES = ("emom", "amrap", "for_time")


def derive_emom_rest(work_seconds: Any) -> Optional[Number]:
    """Rest left in the minute after the work interval, never negative."""
    work = to_number(work_seconds)
    if work is None:
        return None
    return max(0, EMOM_INTERVAL_SECONDS - work)


class _Summary:
    """Ordered summary where each label appears at most once."""

    def __init__(self):
        self.fields: List[DisplayField] = []

    def has(self, label: str) -> bool:
        return any(f.label == label for f in self.fields)

    def push(self, label: str, value: Any, formatter: Callable[[Any], Optional[str]]) -> None:
        if self.has(label):
            return
        field = BlockExtractor.field(label, value, formatter)
        if field is not None:
            self.fields.append(field)


class DensityExtractor(BlockExtractor):
    """Extractor for density training, AMRAP, EMOM and for-time blocks"""

    variant = Variant.DENSITY

    def extract(self, block: Block, index: int) -> BlockDisplay:
        block_type = self.block_type(block, "")
        primary = block.exercises[0] if block.exercises else None
        sources = self.sources(block, primary)

        duration_minutes = resolve(chains.DENSITY_DURATION_MINUTES, sources)
        time_block_seconds = resolve(chains.DENSITY_TIME_BLOCK_SECONDS, sources)
        work_seconds = resolve(chains.DENSITY_WORK_SECONDS, sources)
        rest_between_sets = resolve(chains.DENSITY_REST_BETWEEN_SETS, sources)
        recovery_time = resolve(chains.DENSITY_RECOVERY_TIME, sources)
        target_reps = resolve(chains.DENSITY_TARGET_REPS, sources)
        rounds = resolve(chains.DENSITY_ROUNDS, sources)

        if block_type == "emom" and rest_between_sets is None:
            rest_between_sets = derive_emom_rest(work_seconds)
            if rest_between_sets is not None:
                logger.debug(f"EMOM block {block.id!r}: derived rest {rest_between_sets}s from work interval")

        summary = _Summary()
        if block_type == "emom":
            summary.push("Duration", duration_minutes, format_minutes_value)
            summary.push("Work interval", work_seconds, format_seconds_value)
            summary.push("Rest between sets", rest_between_sets, format_seconds_value)
            reps_per_minute = pick_value(resolve(chains.DENSITY_REPS_PER_MINUTE, sources), target_reps)
            summary.push("Reps per minute", reps_per_minute, format_numeric_value)
            summary.push("Target reps", target_reps, format_numeric_value)
            summary.push("Rounds", rounds, format_numeric_value)
        elif block_type == "amrap":
            summary.push("Duration", duration_minutes, format_minutes_value)
            summary.push("Target reps", target_reps, format_numeric_value)
            summary.push("Rest between sets", rest_between_sets, format_seconds_value)
            summary.push("Rounds", rounds, format_numeric_value)
        elif block_type == "for_time":
            summary.push("Time cap", duration_minutes, format_minutes_value)
            summary.push("Target reps", target_reps, format_numeric_value)
            summary.push("Rest between sets", rest_between_sets, format_seconds_value)
        else:
            summary.push("Time block", time_block_seconds, format_seconds_value)
            summary.push("Target reps", target_reps, format_numeric_value)
            summary.push("Rounds", rounds, format_numeric_value)
            summary.push("Recovery time", recovery_time, format_seconds_value)

        if block_type in RECOVERY_TIME_TYPES:
            summary.push("Recovery time", recovery_time, format_seconds_value)

        primary_entry = BreakdownEntry(
            heading="Primary exercise",
            name=(display_text(primary.name) if primary else None) or "Exercise",
            description=display_text(primary.description) if primary else None,
            notes=display_text(primary.notes) if primary else None,
        )

        return self.display(
            block,
            index,
            title=display_text(block.block_name) or display_text(block.display_type),
            description=DENSITY_DESCRIPTIONS.get(block_type, DEFAULT_DESCRIPTION),
            summary=summary.fields,
            breakdown=[primary_entry],
        )
