"""Workout block interpretation engine."""
from .base import BlockExtractor, normalize_block_type
from .formatters import (
    format_minutes_value,
    format_numeric_value,
    format_rest,
    format_seconds_value,
    format_weight,
)
from .notes_parser import parse_drop_sets_from_notes
from .registry import (
    BLOCK_TYPE_VARIANTS,
    get_extractor,
    interpret_block,
    interpret_blocks,
    register_extractor,
    supported_block_types,
    variant_for,
)
from .resolver import Candidate, pick_numeric, pick_value, resolve
from .type_badge import type_badge_label

__all__ = [
    "BlockExtractor",
    "normalize_block_type",
    "format_minutes_value",
    "format_numeric_value",
    "format_rest",
    "format_seconds_value",
    "format_weight",
    "parse_drop_sets_from_notes",
    "BLOCK_TYPE_VARIANTS",
    "get_extractor",
    "interpret_block",
    "interpret_blocks",
    "register_extractor",
    "supported_block_types",
    "variant_for",
    "Candidate",
    "pick_numeric",
    "pick_value",
    "resolve",
    "type_badge_label",
]
