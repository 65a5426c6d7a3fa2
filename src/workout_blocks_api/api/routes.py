"""
Block Display API Routes

Thin HTTP adapter over the interpretation engine. Nothing here fetches or
persists data: callers post block records (or persisted rows) and receive
canonical display records.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter
from pydantic import BaseModel, Field

from workout_blocks_api.config import settings
from workout_blocks_api.interpretation import interpret_block, interpret_blocks, supported_block_types
from workout_blocks_api.models import Block, BlockDisplay
from workout_blocks_api.services.block_shaping import shape_blocks

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Block Display"])


class InterpretBlockRequest(BaseModel):
    block: Block
    index: int = Field(default=0, ge=0, description="Position of the block among its siblings")


class InterpretBlocksRequest(BaseModel):
    blocks: List[Block] = Field(default_factory=list)


class WorkoutDisplayRequest(BaseModel):
    blocks: List[Dict[str, Any]] = Field(default_factory=list, description="Persisted block rows with nested exercises")
    exercise_catalog: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict,
        description="Exercise id -> {name, description}",
    )


class BlockTypeInfo(BaseModel):
    block_type: str
    variant: str
    label: str


@router.get("/health")
def health():
    """Liveness probe."""
    return {"status": "ok", "environment": settings.ENVIRONMENT}


@router.get("/blocks/types", response_model=List[BlockTypeInfo])
def list_block_types():
    """Block types with a dedicated extractor. Anything else renders as straight sets."""
    return supported_block_types()


@router.post("/blocks/interpret", response_model=BlockDisplay)
def interpret_single_block(request: InterpretBlockRequest):
    """Interpret one block record."""
    return interpret_block(request.block, request.index)


@router.post("/blocks/interpret/batch", response_model=List[BlockDisplay])
def interpret_block_batch(request: InterpretBlocksRequest):
    """Interpret blocks in order; indices are their positions in the list."""
    return interpret_blocks(request.blocks)


@router.post("/workouts/display", response_model=List[BlockDisplay])
def display_workout(request: WorkoutDisplayRequest):
    """
    Shape persisted block rows and interpret them in block order.

    Accepts:
    - blocks: rows from the workout blocks table, each with its exercise rows
    - exercise_catalog: names/descriptions for the referenced exercise ids
    """
    blocks = shape_blocks(request.blocks, request.exercise_catalog)
    logger.info(f"Displaying workout with {len(blocks)} block(s)")
    return interpret_blocks(blocks)
