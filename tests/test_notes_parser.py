"""Unit tests for drop-set notes parsing and structured drop normalization."""
from workout_blocks_api.interpretation.notes_parser import normalize_drop_sets, parse_drop_sets_from_notes


class TestParseDropSetsFromNotes:
    """Test cases for free-text recovery."""

    def test_single_line(self):
        entries = parse_drop_sets_from_notes("Drop 1: -10% for 8 reps")
        assert len(entries) == 1
        assert "10%" in entries[0].percentage
        assert "8" in entries[0].reps
        assert entries[0].label == "Drop 1: -10% for 8 reps"

    def test_multiple_lines_and_commas(self):
        notes = "Start heavy\nDrop 1: -20% for 8x, Drop 2: -40% for 6 reps"
        entries = parse_drop_sets_from_notes(notes)
        assert [e.percentage for e in entries] == ["-20%", "-40%"]
        assert [e.reps for e in entries] == ["8 reps", "6 reps"]

    def test_lines_without_percentage_ignored(self):
        assert parse_drop_sets_from_notes("Go to failure\nThen rest") == []

    def test_leading_bullets_stripped(self):
        entries = parse_drop_sets_from_notes("- 20% for 6x\n• 12.5% then 10 reps")
        assert entries[0].label == "20% for 6x"
        assert entries[0].reps == "6 reps"
        assert entries[1].label == "12.5% then 10 reps"
        assert entries[1].percentage == "12.5%"

    def test_inner_dashes_kept(self):
        entries = parse_drop_sets_from_notes("Drop - 20% - 8 reps")
        assert entries[0].label == "Drop - 20% - 8 reps"

    def test_unreadable_line_still_an_entry(self):
        entries = parse_drop_sets_from_notes("drop by about 5 %")
        assert len(entries) == 1
        assert entries[0].percentage is None
        assert entries[0].label == "drop by about 5 %"

    def test_empty_input(self):
        assert parse_drop_sets_from_notes(None) == []
        assert parse_drop_sets_from_notes("   ") == []
        assert parse_drop_sets_from_notes(42) == []


class TestNormalizeDropSets:
    """Test cases for structured drop lists."""

    def test_key_variants(self):
        entries = normalize_drop_sets([
            {"percentage": 10, "reps": 8, "label": "First"},
            {"drop_percentage": 20, "target_reps": 6},
            {"weight_reduction_percentage": 30, "rep_count": 4, "name": "Last"},
            {"weight_change": "-40%"},
        ])
        assert [e.percentage for e in entries] == [10, 20, 30, "-40%"]
        assert [e.reps for e in entries] == [8, 6, 4, None]
        assert [e.label for e in entries] == ["First", None, "Last", None]

    def test_first_present_key_wins(self):
        entries = normalize_drop_sets([{"percentage": "", "drop_percentage": 15}])
        assert entries[0].percentage == 15

    def test_non_dict_entries(self):
        entries = normalize_drop_sets(["junk", None])
        assert len(entries) == 2
        assert entries[0].percentage is None

    def test_not_a_list(self):
        assert normalize_drop_sets({"percentage": 10}) == []
        assert normalize_drop_sets(None) == []
