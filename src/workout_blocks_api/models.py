"""Data models for workout block interpretation."""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from workout_blocks_api.utils import as_mapping


class Variant(str, Enum):
    """Training modalities that have a dedicated extractor."""
    STRAIGHT_SETS = "straight_sets"
    SUPERSET = "superset"
    DROP_SET = "drop_set"
    CIRCUIT = "circuit"
    DENSITY = "density"


# ---------------------------------------------------------------------------
# Input records
#
# Scalar fields are typed loosely on purpose: persisted blocks carry numbers
# as strings, reps as ranges, and the odd stray type. Validation from a
# mapping must never fail.
# ---------------------------------------------------------------------------


class Exercise(BaseModel):
    """One exercise inside a block, as shaped for display."""
    id: Any = None
    name: Any = None
    description: Any = None
    sets: Any = None
    reps: Any = None  # string, since ranges like "8-12" are valid
    rest_seconds: Any = Field(default=None, alias="restSeconds")
    weight_guidance: Any = Field(default=None, alias="weightGuidance")
    exercise_letter: Any = Field(default=None, alias="exerciseLetter")  # "A"/"B" in a superset
    notes: Any = None
    # Escape hatches: legacy exercise row and structured metadata parsed from notes
    raw: Dict[str, Any] = Field(default_factory=dict)
    meta: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        extra = "ignore"
        populate_by_name = True

    @field_validator("raw", "meta", mode="before")
    @classmethod
    def _coerce_bag(cls, value: Any) -> Dict[str, Any]:
        return as_mapping(value)

    def canonical(self) -> Dict[str, Any]:
        """Canonical exercise fields as a lookup bag."""
        return {
            "id": self.id,
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "rest_seconds": self.rest_seconds,
            "weight_guidance": self.weight_guidance,
            "notes": self.notes,
        }


class Block(BaseModel):
    """
    One prescribed unit of training work within a workout template.

    Values for the same logical field may live in several places:
    - parameters: block-level configuration bag (key names vary by era)
    - raw_block: the persisted block row, including legacy flat columns
    - exercises[].raw / exercises[].meta: per-exercise legacy and structured data
    """
    id: Any = None
    block_type: Any = Field(default=None, alias="blockType")
    block_name: Any = Field(default=None, alias="blockName")
    display_type: Any = Field(default=None, alias="displayType")
    notes: Any = None
    parameters: Dict[str, Any] = Field(default_factory=dict)
    raw_block: Dict[str, Any] = Field(default_factory=dict, alias="rawBlock")
    exercises: List[Exercise] = Field(default_factory=list)

    class Config:
        extra = "ignore"
        populate_by_name = True

    @field_validator("parameters", "raw_block", mode="before")
    @classmethod
    def _coerce_bag(cls, value: Any) -> Dict[str, Any]:
        return as_mapping(value)

    @field_validator("exercises", mode="before")
    @classmethod
    def _coerce_exercises(cls, value: Any) -> List[Any]:
        if not isinstance(value, (list, tuple)):
            return []
        return [e for e in value if isinstance(e, (dict, Exercise))]


# ---------------------------------------------------------------------------
# Output records
# ---------------------------------------------------------------------------


class DisplayField(BaseModel):
    """A labelled, already formatted value."""
    label: str
    value: str


class DropSetEntry(BaseModel):
    """One drop in a drop set, from structured data or parsed from notes."""
    percentage: Any = None
    reps: Any = None
    label: Optional[str] = None


class BreakdownEntry(BaseModel):
    """A per-exercise or per-set line of a block display."""
    heading: str
    name: Optional[str] = None
    description: Optional[str] = None
    badge: Optional[str] = None
    details: List[DisplayField] = Field(default_factory=list)
    annotation: Optional[str] = None
    notes: Optional[str] = None
    entries: List["BreakdownEntry"] = Field(default_factory=list)

    def detail_value(self, label: str) -> Optional[str]:
        for detail in self.details:
            if detail.label == label:
                return detail.value
        return None


class BlockDisplay(BaseModel):
    """Canonical, type-classified display record for one block."""
    index: int
    position_label: str
    block_id: Optional[str] = None
    block_type: str
    variant: Variant
    type_label: str
    title: str
    description: Optional[str] = None
    notes: Optional[str] = None
    summary: List[DisplayField] = Field(default_factory=list)
    breakdown: List[BreakdownEntry] = Field(default_factory=list)
    notice: Optional[str] = None

    def summary_value(self, label: str) -> Optional[str]:
        """Value of the summary field with this label, if populated."""
        for field in self.summary:
            if field.label == label:
                return field.value
        return None


BreakdownEntry.model_rebuild()
