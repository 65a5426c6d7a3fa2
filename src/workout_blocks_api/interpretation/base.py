"""
Base Extractor

Abstract base class for all block extractors.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from workout_blocks_api.config import settings
from workout_blocks_api.interpretation.resolver import Chain, chain_trace, is_present
from workout_blocks_api.interpretation.type_badge import type_badge_label
from workout_blocks_api.models import Block, BlockDisplay, DisplayField, Exercise, Variant
from workout_blocks_api.utils import text_of

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_TYPE = "straight_set"


def normalize_block_type(block_type: Any) -> str:
    """Lower-case the declared type; missing or blank types are straight sets."""
    if not isinstance(block_type, str) or not block_type.strip():
        return DEFAULT_BLOCK_TYPE
    return block_type.strip().lower()


def display_text(value: Any) -> Optional[str]:
    """String form of a present value, else None."""
    if not is_present(value):
        return None
    return text_of(value).strip() if isinstance(value, str) else text_of(value)


class BlockExtractor(ABC):
    """Turns one block record into its canonical display record."""

    variant: Variant
    default_title: str = "Training Block"

    @abstractmethod
    def extract(self, block: Block, index: int) -> BlockDisplay:
        """
        Resolve the block's summary fields and breakdown.

        Args:
            block: The block record; never mutated
            index: Position of the block among its siblings

        Returns:
            A freshly built BlockDisplay
        """
        pass

    def block_type(self, block: Block, default: str) -> str:
        """Lower-cased declared type, with an extractor-specific default."""
        if isinstance(block.block_type, str) and block.block_type.strip():
            return block.block_type.strip().lower()
        return default

    def sources(self, block: Block, exercise: Optional[Exercise] = None) -> Dict[str, Dict[str, Any]]:
        """Source bags for resolving against the block and one exercise."""
        bags: Dict[str, Dict[str, Any]] = {
            "parameters": block.parameters,
            "block_raw": block.raw_block,
        }
        if exercise is not None:
            bags["exercise"] = exercise.canonical()
            bags["meta"] = exercise.meta
            bags["raw"] = exercise.raw
        return bags

    def display(
        self,
        block: Block,
        index: int,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        **fields: Any,
    ) -> BlockDisplay:
        """Build the display record with the header every variant shares."""
        return BlockDisplay(
            index=index,
            position_label=f"Block {index + 1}",
            block_id=display_text(block.id),
            block_type=normalize_block_type(block.block_type),
            variant=self.variant,
            type_label=type_badge_label(block.block_type, block.display_type),
            title=title or self.default_title,
            description=description,
            notes=display_text(block.notes),
            **fields,
        )

    @staticmethod
    def field(
        label: str,
        value: Any,
        formatter: Optional[Callable[[Any], Any]] = None,
    ) -> Optional[DisplayField]:
        """A summary field, or None when the value does not resolve."""
        formatted = formatter(value) if formatter is not None else value
        text = display_text(formatted)
        if text is None:
            return None
        return DisplayField(label=label, value=text)

    @staticmethod
    def populated(*fields: Optional[DisplayField]) -> List[DisplayField]:
        """Drop unresolved fields, keeping order."""
        return [f for f in fields if f is not None]

    def trace(self, block: Block, field: str, chain: Chain, sources: Dict[str, Any]) -> None:
        """Debug-log which candidate a field resolved from."""
        if not settings.LOG_BLOCK_PAYLOADS:
            return
        logger.debug(
            f"{self.variant.value} block {block.id!r}: {field} <- "
            f"{chain_trace(chain, sources) or 'unresolved'}"
        )
