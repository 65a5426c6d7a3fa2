"""
Circuits Extractor

Handles circuits and tabata. Two shapes are supported:
- structured sets: a list of set objects, each with its own ordered exercise
  entries (work/rest/reps per entry)
- a flat exercise rotation, when no structured sets exist anywhere
"""

import logging
from typing import Any, Dict, List, Optional

from workout_blocks_api.interpretation import chains
from workout_blocks_api.interpretation.base import BlockExtractor, display_text
from workout_blocks_api.interpretation.formatters import format_seconds_value
from workout_blocks_api.interpretation.resolver import first_non_empty_list, pick_value, resolve
from workout_blocks_api.models import Block, BlockDisplay, BreakdownEntry, Exercise, Variant

logger = logging.getLogger(__name__)

CIRCUIT_DESCRIPTION = "Perform each exercise sequentially, then rest before the next round."
TABATA_DESCRIPTION = "Alternate work and recovery intervals for each round."


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def build_exercise_lookup(exercises: List[Exercise]) -> Dict[Any, Any]:
    """Exercise id -> name. When several exercises share an id, the first wins."""
    lookup: Dict[Any, Any] = {}
    for exercise in exercises:
        sources = {"raw": exercise.raw, "meta": exercise.meta, "exercise": exercise.canonical()}
        exercise_id = resolve(chains.CIRCUIT_EXERCISE_ID, sources)
        if exercise_id is None or not _hashable(exercise_id):
            continue
        lookup.setdefault(exercise_id, exercise.name)
    return lookup


def _hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


class CircuitsExtractor(BlockExtractor):
    """Extractor for circuits and tabata"""

    variant = Variant.CIRCUIT

    def extract(self, block: Block, index: int) -> BlockDisplay:
        is_tabata = self.block_type(block, "circuit") == "tabata"
        exercises = block.exercises
        metas = [exercise.meta for exercise in exercises]
        first_meta = next((meta for meta in metas if meta), {})

        sources: Dict[str, Dict[str, Any]] = self.sources(block)
        sources["first_meta"] = first_meta
        sources["first_exercise"] = exercises[0].canonical() if exercises else {}

        structured_sets = self._structured_sets(sources, metas)
        first_set = _as_dict(structured_sets[0]) if structured_sets else {}
        first_entries = first_set.get("exercises")
        sources["first_set"] = first_set
        sources["first_entry"] = _as_dict(first_entries[0]) if isinstance(first_entries, list) and first_entries else {}

        rounds = resolve(chains.CIRCUIT_ROUNDS, sources)
        rest_between_rounds = resolve(chains.CIRCUIT_REST_BETWEEN_ROUNDS, sources)
        work_interval = resolve(chains.CIRCUIT_WORK_INTERVAL, sources)
        rest_between_exercises = resolve(chains.CIRCUIT_REST_BETWEEN_EXERCISES, sources)
        rest_between_sets = pick_value(resolve(chains.CIRCUIT_REST_BETWEEN_SETS, sources), rest_between_rounds)
        self.trace(block, "rounds", chains.CIRCUIT_ROUNDS, sources)

        if structured_sets and isinstance(first_entries, list):
            exercises_per_set = len(first_entries)
        else:
            exercises_per_set = len(exercises)

        if structured_sets:
            breakdown = self._set_entries(block, structured_sets, is_tabata)
        else:
            breakdown = self._rotation_entries(block)
        logger.debug(
            f"Circuit block {block.id!r}: {len(structured_sets)} structured set(s), "
            f"{len(exercises)} exercise(s)"
        )

        return self.display(
            block,
            index,
            title=display_text(block.block_name) or ("Tabata" if is_tabata else "Circuit"),
            description=TABATA_DESCRIPTION if is_tabata else CIRCUIT_DESCRIPTION,
            summary=self.populated(
                self.field("Rounds", rounds),
                self.field("Work Interval", work_interval, format_seconds_value),
                self.field("Rest Between Exercises", rest_between_exercises, format_seconds_value),
                self.field("Rest Between Sets", rest_between_sets, format_seconds_value),
                self.field("Exercises per Set", exercises_per_set),
                self.field("Rest Between Rounds", rest_between_rounds, format_seconds_value),
            ),
            breakdown=breakdown,
        )

    def _structured_sets(self, sources: Dict[str, Dict[str, Any]], metas: List[Dict[str, Any]]) -> list:
        candidates = [c.lookup(sources) for c in chains.CIRCUIT_SET_LISTS]
        for key in chains.CIRCUIT_SET_LIST_KEYS:
            candidates.extend(meta.get(key) for meta in metas)
        return first_non_empty_list(candidates)

    def _set_entries(self, block: Block, structured_sets: list, is_tabata: bool) -> List[BreakdownEntry]:
        lookup = build_exercise_lookup(block.exercises)
        entries = []
        for set_position, raw_set in enumerate(structured_sets):
            circuit_set = _as_dict(raw_set)
            set_rest = format_seconds_value(resolve(chains.CIRCUIT_SET_REST, {"set": circuit_set}))
            set_exercises = circuit_set.get("exercises")
            if not isinstance(set_exercises, list):
                set_exercises = []
            entries.append(BreakdownEntry(
                heading=f"Interval {set_position + 1}" if is_tabata else f"Set {set_position + 1}",
                annotation=f"Rest after set: {set_rest}" if set_rest else None,
                entries=[
                    self._set_exercise_entry(block, lookup, _as_dict(entry), position)
                    for position, entry in enumerate(set_exercises)
                ],
            ))
        return entries

    def _set_exercise_entry(
        self,
        block: Block,
        lookup: Dict[Any, Any],
        entry: Dict[str, Any],
        position: int,
    ) -> BreakdownEntry:
        sources = {"entry": entry}
        positional = block.exercises[position] if position < len(block.exercises) else None
        entry_id = pick_value(
            resolve(chains.CIRCUIT_ENTRY_ID, sources),
            positional.raw.get("exercise_id") if positional is not None else None,
        )
        fallback = self._exercise_by_id(block.exercises, entry_id) or positional

        name = pick_value(
            lookup.get(entry_id) if entry_id is not None and _hashable(entry_id) else None,
            entry.get("name"),
            fallback.name if fallback is not None else None,
        )
        return BreakdownEntry(
            heading=f"Exercise {position + 1}",
            name=display_text(name) or f"Exercise {position + 1}",
            details=self.populated(
                self.field("Sets", resolve(chains.CIRCUIT_ENTRY_SETS, sources)),
                self.field("Reps", resolve(chains.CIRCUIT_ENTRY_REPS, sources)),
                self.field("Work", resolve(chains.CIRCUIT_ENTRY_WORK, sources), format_seconds_value),
                self.field("Rest", resolve(chains.CIRCUIT_ENTRY_REST, sources), format_seconds_value),
            ),
        )

    @staticmethod
    def _exercise_by_id(exercises: List[Exercise], entry_id: Any) -> Optional[Exercise]:
        if entry_id is None:
            return None
        for exercise in exercises:
            if exercise.raw.get("exercise_id") == entry_id or exercise.id == entry_id:
                return exercise
        return None

    def _rotation_entries(self, block: Block) -> List[BreakdownEntry]:
        entries = []
        for position, exercise in enumerate(block.exercises):
            work = resolve(chains.CIRCUIT_ROTATION_WORK, {"meta": exercise.meta, "raw": exercise.raw})
            entries.append(BreakdownEntry(
                heading=f"Exercise {position + 1}",
                name=display_text(exercise.name),
                description=display_text(exercise.description),
                annotation=format_seconds_value(work),
                notes=display_text(exercise.notes),
            ))
        return entries
