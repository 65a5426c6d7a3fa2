"""
Straight Sets Extractor

One breakdown entry per exercise. Also the default for block types that have
no extractor of their own (pyramids, ladders, anything unrecognised).
"""

import logging
from typing import Any, Optional

from workout_blocks_api.interpretation import chains
from workout_blocks_api.interpretation.base import BlockExtractor, display_text
from workout_blocks_api.interpretation.formatters import format_rest
from workout_blocks_api.interpretation.resolver import coerce_numeric, resolve
from workout_blocks_api.models import Block, BlockDisplay, BreakdownEntry, Variant
from workout_blocks_api.utils import is_number

logger = logging.getLogger(__name__)


def _rest_display(value: Any) -> Optional[str]:
    value = coerce_numeric(value)
    if is_number(value):
        return format_rest(value)
    return value


class StraightSetsExtractor(BlockExtractor):
    """Extractor for straight sets"""

    variant = Variant.STRAIGHT_SETS
    default_title = "Straight Sets"

    def extract(self, block: Block, index: int) -> BlockDisplay:
        exercises = block.exercises
        first_name = display_text(exercises[0].name) if exercises else None
        block_name = display_text(block.block_name)

        breakdown = []
        for position, exercise in enumerate(exercises):
            sources = self.sources(block, exercise)
            sets = resolve(chains.STRAIGHT_SETS, sources)
            reps = resolve(chains.STRAIGHT_REPS, sources)
            rest = resolve(chains.STRAIGHT_REST, sources)
            weight = resolve(chains.STRAIGHT_WEIGHT, sources)
            self.trace(block, f"exercise[{position}].rest", chains.STRAIGHT_REST, sources)

            breakdown.append(BreakdownEntry(
                heading=f"#{position + 1}",
                name=display_text(exercise.name),
                description=display_text(exercise.description),
                badge=display_text(exercise.exercise_letter),
                details=self.populated(
                    self.field("Sets", sets),
                    self.field("Reps", reps),
                    self.field("Rest", rest, _rest_display),
                    self.field("Weight", weight),
                ),
                notes=display_text(exercise.notes),
            ))

        logger.debug(f"Straight sets block {block.id!r}: {len(breakdown)} exercise(s)")
        return self.display(
            block,
            index,
            title=block_name or first_name or display_text(block.display_type),
            description=first_name if block_name else None,
            breakdown=breakdown,
        )
