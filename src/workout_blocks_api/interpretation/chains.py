"""
Candidate chains

Every precedence chain used by the extractors, declared once. Source names:

- exercise:   canonical exercise fields (Exercise.canonical())
- meta / raw: the exercise's structured metadata and legacy row
- parameters: the block parameter bag
- block_raw:  the persisted block row
- exercise_a / meta_a, exercise_b / meta_b: superset roles
- first_exercise / first_meta: first exercise, first non-empty meta (circuits)
- first_set / first_entry / set / entry: structured circuit sets
"""

from workout_blocks_api.interpretation.formatters import format_weight
from workout_blocks_api.interpretation.resolver import Candidate, chain


def _kg(source: str, key: str) -> Candidate:
    return Candidate(source, key, transform=format_weight)


# ---------------------------------------------------------------------------
# Straight sets (resolved per exercise)
# ---------------------------------------------------------------------------

STRAIGHT_SETS = chain(
    "exercise.sets",
    "meta.sets",
    "meta.total_sets",
    "block_raw.total_sets",
    "parameters.total_sets",
    "meta.rounds",
    "raw.sets",
    "block_raw.sets",
)

STRAIGHT_REPS = chain(
    "exercise.reps",
    "meta.reps",
    "meta.rep_range",
    "meta.exercise_reps",
    "block_raw.reps_per_set",
    "parameters.reps_per_set",
    "parameters.reps",
    "raw.reps",
    "block_raw.reps",
)

STRAIGHT_REST = chain(
    "exercise.rest_seconds",
    "block_raw.rest_seconds",
    "parameters.rest_seconds",
    "parameters.rest",
    "meta.rest_seconds",
    "meta.rest",
    "raw.rest_seconds",
    "block_raw.rest_between_sets",
    "block_raw.rest",
)

# Pre-formatted guidance beats every raw numeric field.
STRAIGHT_WEIGHT = chain(
    "exercise.weight_guidance",
    _kg("raw", "weight_kg"),
    _kg("raw", "working_weight"),
    _kg("raw", "starting_weight"),
    _kg("meta", "weight"),
    _kg("meta", "working_weight"),
    _kg("meta", "starting_weight"),
    _kg("parameters", "weight"),
    _kg("parameters", "weight_kg"),
    _kg("block_raw", "weight"),
    _kg("block_raw", "target_weight"),
)

# ---------------------------------------------------------------------------
# Supersets (sets/reps resolved per role with that role's bags as exercise/meta)
# ---------------------------------------------------------------------------

SUPERSET_SETS = chain(
    "meta.sets",
    "exercise.sets",
    "parameters.sets",
    "block_raw.total_sets",
)

SUPERSET_REPS_A = chain(
    "meta.reps",
    "meta.first_exercise_reps",
    "exercise.reps",
    "parameters.reps_per_set",
    "block_raw.reps_per_set",
)

SUPERSET_REPS_B = chain(
    "meta.reps",
    "meta.second_exercise_reps",
    "exercise.reps",
    "parameters.reps_per_set",
    "block_raw.reps_per_set",
)

SUPERSET_REST_BETWEEN_PAIRS = chain(
    "exercise_a.rest_seconds",
    "exercise_b.rest_seconds",
    "block_raw.rest_seconds",
    "parameters.rest_seconds",
    "parameters.rest_between_pairs",
    "parameters.rest",
    "meta_a.rest_seconds",
    "meta_b.rest_seconds",
    "meta_a.rest_between_pairs",
    "meta_b.rest_between_pairs",
)

# ---------------------------------------------------------------------------
# Drop sets (primary exercise)
# ---------------------------------------------------------------------------

DROP_STARTING_WEIGHT = chain(
    "exercise.weight_guidance",
    "raw.starting_weight",
    "raw.weight_kg",
    "meta.starting_weight",
    "meta.weight",
    "parameters.starting_weight",
    "parameters.weight",
    "block_raw.starting_weight",
    "block_raw.weight",
)

DROP_LIST_PRIMARY = chain(
    "raw.drop_sets",
    "meta.drop_sets",
    "meta.drops",
    "meta.drop_progression",
)

DROP_LIST_BLOCK = chain(
    "block_raw.drop_sets",
    "parameters.drop_sets",
)

DROP_REST_BETWEEN_DROPS = chain(
    "raw.rest_between_drops",
    "meta.rest_between_drops",
    "meta.rest_seconds",
    "block_raw.rest_between_drops",
    "parameters.rest_between_drops",
    "exercise.rest_seconds",
    "block_raw.rest_seconds",
)

# ---------------------------------------------------------------------------
# Circuits / Tabata
# ---------------------------------------------------------------------------

# Searched before the per-exercise metas, which the extractor appends in order.
CIRCUIT_SET_LISTS = chain(
    "parameters.circuit_sets",
    "parameters.tabata_sets",
    "first_meta.circuit_sets",
    "first_meta.tabata_sets",
)

CIRCUIT_SET_LIST_KEYS = ("circuit_sets", "tabata_sets")

CIRCUIT_ROUNDS = chain(
    "parameters.rounds",
    "parameters.total_sets",
    "block_raw.rotation_count",
    "block_raw.total_sets",
    "first_meta.rounds",
    "first_exercise.sets",
)

CIRCUIT_REST_BETWEEN_ROUNDS = chain(
    "parameters.rest_between_rounds",
    "parameters.rest_seconds",
    "block_raw.rest_between_rounds",
    "block_raw.rest_seconds",
    "first_meta.rest_between_rounds",
    "first_meta.rest_seconds",
)

CIRCUIT_WORK_INTERVAL = chain(
    "parameters.work_seconds",
    "first_meta.work_seconds",
    "first_entry.work_seconds",
    "first_entry.work",
    "first_entry.duration_seconds",
    "first_entry.duration",
)

CIRCUIT_REST_BETWEEN_EXERCISES = chain(
    "first_entry.rest_seconds",
    "first_entry.rest_after",
    "first_meta.rest_after_exercise",
    "first_meta.rest_between_exercises",
)

# Falls back to rest between rounds when nothing more specific resolves.
CIRCUIT_REST_BETWEEN_SETS = chain(
    "first_set.rest_between_sets",
    "first_set.rest_seconds",
    "parameters.rest_after_set",
    "parameters.rest_after",
    "first_meta.rest_after_set",
    "first_meta.rest_after",
)

CIRCUIT_SET_REST = chain("set.rest_between_sets", "set.rest_seconds")

CIRCUIT_ENTRY_ID = chain("entry.exercise_id", "entry.id")
CIRCUIT_ENTRY_SETS = chain("entry.sets")
CIRCUIT_ENTRY_REPS = chain("entry.reps", "entry.target_reps", "entry.rep_target")
CIRCUIT_ENTRY_WORK = chain("entry.work_seconds", "entry.duration", "entry.duration_seconds")
CIRCUIT_ENTRY_REST = chain("entry.rest_seconds", "entry.rest_after")

# Key of the exercise-name lookup table.
CIRCUIT_EXERCISE_ID = chain("raw.exercise_id", "raw.id", "meta.exercise_id", "exercise.id")

CIRCUIT_ROTATION_WORK = chain(
    "meta.work_seconds",
    "raw.work_seconds",
    "meta.duration_seconds",
    "meta.duration",
)

# ---------------------------------------------------------------------------
# Density family (primary exercise)
# ---------------------------------------------------------------------------

DENSITY_DURATION_MINUTES = chain(
    "parameters.duration_minutes",
    "parameters.amrap_duration",
    "parameters.emom_duration",
    "parameters.time_cap",
    "block_raw.duration_minutes",
    "block_raw.time_cap_minutes",
    "meta.duration_minutes",
    "meta.amrap_duration",
    "meta.emom_duration",
    "meta.time_cap",
)

DENSITY_TIME_BLOCK_SECONDS = chain(
    "parameters.time_block_duration",
    "parameters.duration_seconds",
    "block_raw.time_block_duration",
    "block_raw.duration_seconds",
    "meta.time_block_duration",
    "meta.duration_seconds",
)

DENSITY_WORK_SECONDS = chain(
    "parameters.work_seconds",
    "meta.work_seconds",
    "raw.work_seconds",
)

DENSITY_REST_BETWEEN_SETS = chain(
    "parameters.rest_after_set",
    "parameters.rest_after",
    "block_raw.rest_after_set",
    "meta.rest_after_set",
    "meta.rest_after",
    "block_raw.rest_seconds",
    "exercise.rest_seconds",
)

DENSITY_RECOVERY_TIME = chain(
    "parameters.recovery_time",
    "block_raw.recovery_time",
    "meta.recovery_time",
    "exercise.rest_seconds",
)

DENSITY_TARGET_REPS = chain(
    "parameters.target_reps",
    "block_raw.target_reps",
    "meta.target_reps",
    "exercise.reps",
)

DENSITY_ROUNDS = chain(
    "parameters.rounds",
    "block_raw.rounds",
    "meta.rounds",
    "exercise.sets",
)

# Falls back to the target reps.
DENSITY_REPS_PER_MINUTE = chain(
    "meta.emom_reps",
    "parameters.emom_reps",
    "block_raw.emom_reps",
)
