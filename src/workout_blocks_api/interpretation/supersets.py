"""
Supersets Extractor

Two roles, A and B, alternated with minimal rest. Each role resolves its own
sets and reps so paired exercises can carry asymmetric rep targets.
"""

import logging
from typing import Any, Dict, List, Optional

from workout_blocks_api.interpretation import chains
from workout_blocks_api.interpretation.base import BlockExtractor, display_text
from workout_blocks_api.interpretation.formatters import format_rest
from workout_blocks_api.interpretation.resolver import Chain, resolve
from workout_blocks_api.models import Block, BlockDisplay, BreakdownEntry, Exercise, Variant
from workout_blocks_api.utils import is_number

logger = logging.getLogger(__name__)

SUPERSET_DESCRIPTION = "Alternate the two exercises with minimal rest in between."


def find_role(exercises: List[Exercise], letter: str, position: int) -> Optional[Exercise]:
    """Exercise tagged with `letter`, else the one at `position`."""
    for exercise in exercises:
        tag = exercise.exercise_letter
        if isinstance(tag, str) and tag.strip().upper() == letter:
            return exercise
    return exercises[position] if len(exercises) > position else None


class SupersetsExtractor(BlockExtractor):
    """Extractor for supersets"""

    variant = Variant.SUPERSET
    default_title = "Superset"

    def extract(self, block: Block, index: int) -> BlockDisplay:
        exercise_a = find_role(block.exercises, "A", 0)
        exercise_b = find_role(block.exercises, "B", 1)

        breakdown = [
            self._role_entry(block, letter, exercise, reps_chain)
            for letter, exercise, reps_chain in (
                ("A", exercise_a, chains.SUPERSET_REPS_A),
                ("B", exercise_b, chains.SUPERSET_REPS_B),
            )
            if exercise is not None
        ]

        sources = self._pair_sources(block, exercise_a, exercise_b)
        rest = resolve(chains.SUPERSET_REST_BETWEEN_PAIRS, sources)
        self.trace(block, "rest_between_pairs", chains.SUPERSET_REST_BETWEEN_PAIRS, sources)

        return self.display(
            block,
            index,
            title=display_text(block.block_name),
            description=SUPERSET_DESCRIPTION,
            summary=self.populated(
                self.field("Rest between sets", rest, lambda v: format_rest(v) if is_number(v) else v),
            ),
            breakdown=breakdown,
        )

    def _role_entry(self, block: Block, letter: str, exercise: Exercise, reps_chain: Chain) -> BreakdownEntry:
        sources = self.sources(block, exercise)
        return BreakdownEntry(
            heading=f"Exercise {letter}",
            name=display_text(exercise.name),
            description=display_text(exercise.description),
            badge=letter,
            details=self.populated(
                self.field("Sets", resolve(chains.SUPERSET_SETS, sources)),
                self.field("Reps", resolve(reps_chain, sources)),
            ),
            notes=display_text(exercise.notes),
        )

    def _pair_sources(
        self,
        block: Block,
        exercise_a: Optional[Exercise],
        exercise_b: Optional[Exercise],
    ) -> Dict[str, Dict[str, Any]]:
        bags = self.sources(block)
        for suffix, exercise in (("a", exercise_a), ("b", exercise_b)):
            if exercise is not None:
                bags[f"exercise_{suffix}"] = exercise.canonical()
                bags[f"meta_{suffix}"] = exercise.meta
        return bags
