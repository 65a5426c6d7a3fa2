"""
Drop Sets Extractor

Drop data is taken from the first place it exists:
1. a structured list on the primary exercise (raw row, then meta)
2. a structured list on the block (raw row, then parameters)
3. coach notes, parsed line by line (exercise notes, then block notes)
"""

import logging
from typing import List, Tuple

from workout_blocks_api.interpretation import chains
from workout_blocks_api.interpretation.base import BlockExtractor, display_text
from workout_blocks_api.interpretation.formatters import (
    format_percentage,
    format_reps,
    format_rest,
    format_weight,
)
from workout_blocks_api.interpretation.notes_parser import (
    normalize_drop_sets,
    parse_drop_sets_from_notes,
)
from workout_blocks_api.interpretation.resolver import Chain, SourceBags, first_non_empty_list, resolve
from workout_blocks_api.models import Block, BlockDisplay, BreakdownEntry, DropSetEntry, Variant
from workout_blocks_api.utils import is_number

logger = logging.getLogger(__name__)

NO_DROPS_NOTICE = "Drop details not provided. Follow coach guidance for weight reductions."


def _drop_sources(block: Block) -> SourceBags:
    primary = block.exercises[0] if block.exercises else None
    bags = {"parameters": block.parameters, "block_raw": block.raw_block}
    if primary is not None:
        bags.update(meta=primary.meta, raw=primary.raw)
    return bags


def _structured_list(candidates: Chain, sources: SourceBags) -> List[DropSetEntry]:
    return normalize_drop_sets(first_non_empty_list(c.lookup(sources) for c in candidates))


def structured_drop_sets(block: Block) -> Tuple[List[DropSetEntry], str]:
    """Structured drop entries and their origin ("exercise", "block" or "none")."""
    sources = _drop_sources(block)
    for candidates, origin in ((chains.DROP_LIST_PRIMARY, "exercise"), (chains.DROP_LIST_BLOCK, "block")):
        entries = _structured_list(candidates, sources)
        if entries:
            return entries, origin
    return [], "none"


def has_structured_drop_sets(block: Block) -> bool:
    """True when the primary exercise or the block carries a structured drop list."""
    return structured_drop_sets(block)[1] != "none"


def resolve_drop_sets(block: Block) -> Tuple[List[DropSetEntry], str]:
    """Drop entries and where they came from ("exercise", "block", "notes" or "none")."""
    entries, origin = structured_drop_sets(block)
    if entries:
        return entries, origin

    primary = block.exercises[0] if block.exercises else None
    for notes in (primary.notes if primary is not None else None, block.notes):
        entries = parse_drop_sets_from_notes(notes)
        if entries:
            return entries, "notes"
    return [], "none"


class DropSetsExtractor(BlockExtractor):
    """Extractor for drop sets"""

    variant = Variant.DROP_SET
    default_title = "Drop Set"

    def extract(self, block: Block, index: int) -> BlockDisplay:
        primary = block.exercises[0] if block.exercises else None
        sources = self.sources(block, primary)

        starting_weight = resolve(chains.DROP_STARTING_WEIGHT, sources)
        rest_between_drops = resolve(chains.DROP_REST_BETWEEN_DROPS, sources)
        drops, origin = resolve_drop_sets(block)
        logger.debug(f"Drop set block {block.id!r}: {len(drops)} drop(s) from {origin}")

        breakdown = [
            BreakdownEntry(
                heading=f"Drop {position + 1}",
                name=entry.label,
                details=self.populated(
                    self.field("Drop", entry.percentage, format_percentage),
                    self.field("Reps", entry.reps, format_reps),
                ),
            )
            for position, entry in enumerate(drops)
        ]

        return self.display(
            block,
            index,
            title=display_text(block.block_name) or (display_text(primary.name) if primary else None),
            description=display_text(primary.description) if primary else None,
            summary=self.populated(
                self.field("Starting weight", starting_weight, format_weight),
                self.field(
                    "Rest between drops",
                    rest_between_drops,
                    lambda v: format_rest(v) if is_number(v) else v,
                ),
            ),
            breakdown=breakdown,
            notice=None if breakdown else NO_DROPS_NOTICE,
        )
