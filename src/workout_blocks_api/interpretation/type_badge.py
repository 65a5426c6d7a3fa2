"""Type badge labels for block types, including ones without a dedicated extractor."""
import re
from typing import Any, Dict, Optional

DEFAULT_BADGE_LABEL = "WORKOUT"

TYPE_BADGE_LABELS: Dict[str, str] = {
    "straight_set": "STRAIGHT SETS",
    "straight_sets": "STRAIGHT SETS",
    "superset": "SUPERSETS",
    "drop_set": "DROPSETS",
    "circuit": "CIRCUITS",
    "density": "DENSITY",
    "density_training": "DENSITY",
    "giant_set": "GIANT SET",
    "rest_pause": "REST-PAUSE",
    "cluster_set": "CLUSTER SET",
    "pyramid_set": "PYRAMID SET",
    "ladder": "LADDER",
    "amrap": "AMRAP",
    "emom": "EMOM",
    "tabata": "TABATA",
    "for_time": "FOR TIME",
}

_SPACING_PATTERN = re.compile(r'[_\s]+')


def _badge_text(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    text = _SPACING_PATTERN.sub(" ", value).strip()
    return text.upper() if text else None


def type_badge_label(block_type: Any, display_label: Any = None) -> str:
    """
    Badge label for a block type.

    Known types use the fixed table. Anything else shows the block's own
    display label, else the raw type with underscores as spaces, else WORKOUT.
    """
    normalized = block_type.strip().lower() if isinstance(block_type, str) and block_type.strip() else "straight_set"
    label = TYPE_BADGE_LABELS.get(normalized)
    if label is not None:
        return label
    return _badge_text(display_label) or _badge_text(block_type) or DEFAULT_BADGE_LABEL
