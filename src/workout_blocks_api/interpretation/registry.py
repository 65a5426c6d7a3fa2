"""Block type normalization and extractor dispatch."""
import logging
from typing import Any, Dict, List, Mapping, Sequence, Type, Union

from workout_blocks_api.config import settings
from workout_blocks_api.interpretation.base import BlockExtractor, normalize_block_type
from workout_blocks_api.interpretation.circuits import CircuitsExtractor
from workout_blocks_api.interpretation.density import DensityExtractor
from workout_blocks_api.interpretation.drop_sets import DropSetsExtractor
from workout_blocks_api.interpretation.straight_sets import StraightSetsExtractor
from workout_blocks_api.interpretation.supersets import SupersetsExtractor
from workout_blocks_api.interpretation.type_badge import type_badge_label
from workout_blocks_api.models import Block, BlockDisplay, Variant

logger = logging.getLogger(__name__)

DEFAULT_VARIANT = Variant.STRAIGHT_SETS

# Normalized block type -> variant. Several synonyms share an extractor.
BLOCK_TYPE_VARIANTS: Dict[str, Variant] = {
    "straight_set": Variant.STRAIGHT_SETS,
    "straight_sets": Variant.STRAIGHT_SETS,
    "superset": Variant.SUPERSET,
    "drop_set": Variant.DROP_SET,
    "circuit": Variant.CIRCUIT,
    "tabata": Variant.CIRCUIT,
    "density": Variant.DENSITY,
    "density_training": Variant.DENSITY,
    "amrap": Variant.DENSITY,
    "emom": Variant.DENSITY,
    "for_time": Variant.DENSITY,
}

_EXTRACTOR_REGISTRY: Dict[Variant, Type[BlockExtractor]] = {}

BlockInput = Union[Block, Mapping[str, Any]]


def register_extractor(extractor_class: Type[BlockExtractor]) -> None:
    """Register the extractor class for its variant.

    Raises:
        ValueError: If an extractor is already registered for this variant.
    """
    variant = extractor_class.variant
    if variant in _EXTRACTOR_REGISTRY:
        raise ValueError(f"Extractor already registered for variant '{variant.value}'")
    _EXTRACTOR_REGISTRY[variant] = extractor_class


def variant_for(block_type: Any) -> Variant:
    """Variant for a declared block type; unknown types are straight sets."""
    return BLOCK_TYPE_VARIANTS.get(normalize_block_type(block_type), DEFAULT_VARIANT)


def get_extractor(block_type: Any) -> BlockExtractor:
    """Instantiated extractor for a declared block type. Never fails."""
    cls = _EXTRACTOR_REGISTRY.get(variant_for(block_type)) or _EXTRACTOR_REGISTRY[DEFAULT_VARIANT]
    return cls()


def coerce_block(block: Any) -> Block:
    """Accept a Block or a mapping; anything else is an empty block."""
    if isinstance(block, Block):
        return block
    if isinstance(block, Mapping):
        return Block.model_validate(dict(block))
    logger.warning(f"Ignoring block payload of type {type(block).__name__}")
    return Block()


def interpret_block(block: BlockInput, index: int = 0) -> BlockDisplay:
    """Interpret one block record into its canonical display record."""
    record = coerce_block(block)
    extractor = get_extractor(record.block_type)

    if settings.LOG_BLOCK_PAYLOADS:
        logger.debug(
            f"Interpreting block {index} ({record.block_type!r} -> {extractor.variant.value}): "
            f"{record.model_dump(by_alias=True)}"
        )

    try:
        return extractor.extract(record, index)
    except Exception as e:
        logger.exception(f"Failed to interpret block {record.id!r}: {e}")
        return extractor.display(record, index, title=None)


def interpret_blocks(blocks: Sequence[BlockInput]) -> List[BlockDisplay]:
    """Interpret a list of blocks, using their positions as indices."""
    return [interpret_block(block, position) for position, block in enumerate(blocks)]


def supported_block_types() -> List[Dict[str, str]]:
    """Registered block types with their variant and badge label."""
    return [
        {"block_type": block_type, "variant": variant.value, "label": type_badge_label(block_type)}
        for block_type, variant in BLOCK_TYPE_VARIANTS.items()
    ]


register_extractor(StraightSetsExtractor)
register_extractor(SupersetsExtractor)
register_extractor(DropSetsExtractor)
register_extractor(CircuitsExtractor)
register_extractor(DensityExtractor)
