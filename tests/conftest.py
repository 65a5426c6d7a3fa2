"""
Test fixtures for workout-blocks-api.

Provides sample block records in the shapes seen across authoring eras, plus
a FastAPI test client.
"""

import sys
from pathlib import Path
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

# Repo root: .../workout-blocks-api
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_blocks_api...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from workout_blocks_api.main import app


# ---------------------------------------------------------------------------
# Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample Block Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def straight_set_block() -> Dict[str, Any]:
    """Straight sets with canonical fields on the exercises."""
    return {
        "id": "block-1",
        "blockType": "straight_set",
        "blockName": "Main Lift",
        "parameters": {},
        "rawBlock": {"total_sets": 5, "reps_per_set": "5", "rest_seconds": 180},
        "exercises": [
            {
                "id": "ex-1",
                "name": "Back Squat",
                "description": "High bar",
                "sets": 4,
                "reps": "6-8",
                "restSeconds": 120,
                "weightGuidance": "100 kg",
                "exerciseLetter": "A",
                "raw": {"weight_kg": 100},
                "meta": {},
            },
            {
                "id": "ex-2",
                "name": "Romanian Deadlift",
                "raw": {"weight_kg": 80},
                "meta": {},
            },
        ],
    }


@pytest.fixture
def legacy_straight_set_block() -> Dict[str, Any]:
    """Straight sets where everything lives in legacy bags."""
    return {
        "id": "block-legacy",
        "blockType": None,
        "parameters": {"rest": "90"},
        "rawBlock": {},
        "exercises": [
            {
                "id": "ex-1",
                "name": "Bench Press",
                "sets": None,
                "reps": "",
                "raw": {"sets": 3, "reps": "10", "working_weight": 60},
                "meta": {},
            }
        ],
    }


@pytest.fixture
def superset_block() -> Dict[str, Any]:
    return {
        "id": "block-ss",
        "blockType": "superset",
        "blockName": "Arms",
        "parameters": {"sets": 3},
        "rawBlock": {"rest_seconds": 90},
        "exercises": [
            {"id": "b", "name": "Triceps Pushdown", "exerciseLetter": "B", "meta": {"second_exercise_reps": "12-15"}},
            {"id": "a", "name": "Barbell Curl", "exerciseLetter": "A", "meta": {"first_exercise_reps": "8-10"}},
        ],
    }


@pytest.fixture
def drop_set_block() -> Dict[str, Any]:
    return {
        "id": "block-ds",
        "blockType": "drop_set",
        "parameters": {},
        "rawBlock": {"rest_between_drops": 15},
        "exercises": [
            {
                "id": "ex-1",
                "name": "Lateral Raise",
                "description": "Strip the weight, no rest",
                "raw": {
                    "starting_weight": 12,
                    "drop_sets": [
                        {"drop_percentage": 20, "target_reps": 10},
                        {"weight_change": "-20%", "rep_count": 8, "name": "Final drop"},
                    ],
                },
                "meta": {},
            }
        ],
    }


@pytest.fixture
def structured_circuit_block() -> Dict[str, Any]:
    return {
        "id": "block-circuit",
        "blockType": "circuit",
        "blockName": "Finisher",
        "parameters": {
            "rounds": 3,
            "rest_between_rounds": 120,
            "circuit_sets": [
                {
                    "rest_between_sets": 90,
                    "exercises": [
                        {"exercise_id": "lib-burpee", "work_seconds": 40, "rest_seconds": 20},
                        {"exercise_id": "lib-swing", "reps": 15},
                    ],
                },
                {
                    "exercises": [
                        {"exercise_id": "lib-burpee", "work_seconds": 30},
                        {"exercise_id": "lib-swing", "target_reps": 20},
                        {"name": "Plank", "duration": 60},
                    ],
                },
            ],
        },
        "rawBlock": {},
        "exercises": [
            {"id": "row-1", "name": "Burpee", "raw": {"exercise_id": "lib-burpee"}, "meta": {}},
            {"id": "row-2", "name": "Kettlebell Swing", "raw": {"exercise_id": "lib-swing"}, "meta": {}},
        ],
    }


@pytest.fixture
def emom_block() -> Dict[str, Any]:
    return {
        "id": "block-emom",
        "blockType": "EMOM",
        "parameters": {"emom_duration": 12, "work_seconds": 40},
        "rawBlock": {},
        "exercises": [
            {"id": "ex-1", "name": "Thruster", "reps": "8", "meta": {}, "raw": {}},
        ],
    }


@pytest.fixture
def persisted_block_rows() -> Dict[str, Any]:
    """Rows as loaded from the program tables, with an exercise catalog."""
    return {
        "blocks": [
            {
                "id": "blk-2",
                "block_order": 2,
                "block_type": "superset",
                "block_name": "Accessory",
                "block_notes": "test",
                "total_sets": 3,
                "reps_per_set": "12",
                "rest_seconds": 60,
                "block_parameters": '{"rest_between_pairs": 75}',
                "exercises": [
                    {"id": "r-2", "exercise_id": "ex-row", "exercise_order": 2, "exercise_letter": "B"},
                    {"id": "r-1", "exercise_id": "ex-press", "exercise_order": 1, "exercise_letter": "A", "notes": '{"first_exercise_reps": "8"}'},
                ],
            },
            {
                "id": "blk-1",
                "block_order": 1,
                "block_type": "straight_set",
                "block_name": None,
                "block_notes": "  Brace hard  ",
                "total_sets": 4,
                "reps_per_set": "5",
                "rest_seconds": 180,
                "block_parameters": None,
                "exercises": [
                    {"id": "r-3", "exercise_id": "ex-squat", "exercise_order": 1, "weight_kg": 120, "notes": "test"},
                ],
            },
        ],
        "exercise_catalog": {
            "ex-press": {"name": "Dumbbell Press", "description": "Neutral grip"},
            "ex-row": {"name": "Chest Supported Row"},
            "ex-squat": {"name": "Back Squat", "description": ""},
        },
    }
