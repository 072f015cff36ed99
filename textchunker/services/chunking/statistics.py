"""Aggregate size metrics over a chunk collection."""

import math
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from textchunker.services.chunking.exceptions import EmptyInputError


class ChunkStatistics(BaseModel):
    """Character-length statistics; chunk_sizes follows the input order."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    total_chunks: int = Field(..., ge=1)
    total_characters: int = Field(..., ge=0)
    average_chunk_size: int = Field(..., ge=0, description="Mean length, rounded half up")
    min_chunk_size: int = Field(..., ge=0)
    max_chunk_size: int = Field(..., ge=0)
    chunk_sizes: list[int] = Field(default_factory=list)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_statistics(chunks: Sequence[str]) -> ChunkStatistics:
    """Compute per-chunk lengths, total, mean, min and max. Raises EmptyInputError on no chunks."""
    if not chunks:
        raise EmptyInputError("Cannot compute statistics for an empty chunk collection")
    sizes = [len(chunk) for chunk in chunks]
    total = sum(sizes)
    return ChunkStatistics(
        total_chunks=len(sizes),
        total_characters=total,
        average_chunk_size=_round_half_up(total / len(sizes)),
        min_chunk_size=min(sizes),
        max_chunk_size=max(sizes),
        chunk_sizes=sizes,
    )
