"""Tests for the density family extractor (density, AMRAP, EMOM, for time)."""
import pytest
from workout_blocks_api.interpretation import interpret_block
from workout_blocks_api.interpretation.density import (
    DEFAULT_DESCRIPTION,
    DENSITY_DESCRIPTIONS,
    DensityExtractor,
    derive_emom_rest,
)
from workout_blocks_api.models import Block, Variant


def labels(display):
    return [f.label for f in display.summary]


class TestEmom:
    """Test cases for EMOM blocks."""

    def test_rest_derived_from_work(self, emom_block):
        display = interpret_block(emom_block)

        assert display.variant == Variant.DENSITY
        assert display.block_type == "emom"
        assert display.type_label == "EMOM"
        assert display.description == DENSITY_DESCRIPTIONS["emom"]
        assert labels(display) == ["Duration", "Work interval", "Rest between sets", "Reps per minute", "Target reps"]
        assert display.summary_value("Duration") == "12 min"
        assert display.summary_value("Work interval") == "40s"
        assert display.summary_value("Rest between sets") == "20s"
        assert display.summary_value("Reps per minute") == "8"

    def test_rest_clamped_at_zero(self, emom_block):
        emom_block["parameters"]["work_seconds"] = 75
        display = interpret_block(emom_block)
        assert display.summary_value("Rest between sets") == "0s"

    def test_explicit_rest_wins(self, emom_block):
        emom_block["parameters"]["rest_after_set"] = 15
        display = interpret_block(emom_block)
        assert display.summary_value("Rest between sets") == "15s"

    def test_no_work_no_rest(self, emom_block):
        del emom_block["parameters"]["work_seconds"]
        display = interpret_block(emom_block)
        assert display.summary_value("Rest between sets") is None

    def test_emom_reps_beat_target(self, emom_block):
        emom_block["exercises"][0]["meta"] = {"emom_reps": 5}
        display = interpret_block(emom_block)
        assert display.summary_value("Reps per minute") == "5"
        assert display.summary_value("Target reps") == "8"

    @pytest.mark.parametrize("work,expected", [(40, 20), ("45", 15), (60, 0), (90, 0), (None, None), ("fast", None), (10**400, None)])
    def test_derive_emom_rest(self, work, expected):
        assert derive_emom_rest(work) == expected


class TestOtherDensityTypes:
    """Test cases for AMRAP, for time and plain density."""

    def test_amrap(self):
        display = interpret_block({
            "blockType": "amrap",
            "parameters": {"amrap_duration": 10, "target_reps": 50, "recovery_time": 120},
        })
        assert labels(display) == ["Duration", "Target reps", "Recovery time"]
        assert display.summary_value("Duration") == "10 min"
        assert display.summary_value("Target reps") == "50"
        assert display.summary_value("Recovery time") == "2m"
        assert display.type_label == "AMRAP"

    def test_for_time(self):
        display = interpret_block({
            "blockType": "for_time",
            "parameters": {"time_cap": 20},
            "exercises": [{"name": "Row", "reps": "2000m"}],
        })
        assert labels(display) == ["Time cap", "Target reps"]
        assert display.summary_value("Time cap") == "20 min"
        assert display.summary_value("Target reps") == "2000m"

    def test_density_training(self):
        display = interpret_block({
            "blockType": "density_training",
            "blockName": "Pull density",
            "parameters": {"time_block_duration": 600, "rounds": 6},
            "exercises": [{"name": "Chin-up", "reps": 5, "restSeconds": 30}],
        })
        assert display.title == "Pull density"
        assert labels(display) == ["Time block", "Target reps", "Rounds", "Recovery time"]
        assert display.summary_value("Time block") == "10m"
        assert display.summary_value("Recovery time") == "30s"
        assert display.type_label == "DENSITY"

    def test_primary_exercise_entry(self):
        display = interpret_block({
            "blockType": "density",
            "exercises": [{"name": "Push-up", "description": "Strict", "notes": "Chest to floor"}],
        })
        (entry,) = display.breakdown
        assert entry.heading == "Primary exercise"
        assert entry.name == "Push-up"
        assert entry.description == "Strict"
        assert entry.notes == "Chest to floor"
        assert display.description == DENSITY_DESCRIPTIONS["density"]

    def test_no_exercises(self):
        display = interpret_block({"blockType": "amrap"})
        assert display.breakdown[0].name == "Exercise"
        assert display.summary == []
        assert display.title == "Training Block"

    def test_unlisted_subtype_description(self):
        display = DensityExtractor().extract(Block(block_type="death_by"), 0)
        assert display.description == DEFAULT_DESCRIPTION
        assert display.type_label == "DEATH BY"
