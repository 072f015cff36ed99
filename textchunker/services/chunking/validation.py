"""Chunk size validation against a maximum bound."""

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from textchunker.services.chunking.exceptions import InvalidConfigError


class ValidationResult(BaseModel):
    """Outcome of checking chunks against a size bound. Indices are 0-based, in input order."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    is_valid: bool
    total_chunks: int = Field(..., ge=0)
    valid_chunks: int = Field(..., ge=0)
    oversized_chunks: int = Field(..., ge=0)
    oversized_indices: list[int] = Field(default_factory=list)


def validate_chunks(chunks: Sequence[str], max_size: int) -> ValidationResult:
    """Flag chunks longer than max_size. Does not modify chunks."""
    if max_size < 0:
        raise InvalidConfigError(f"max_size must not be negative, got {max_size}")
    oversized = [i for i, chunk in enumerate(chunks) if len(chunk) > max_size]
    return ValidationResult(
        is_valid=not oversized,
        total_chunks=len(chunks),
        valid_chunks=len(chunks) - len(oversized),
        oversized_chunks=len(oversized),
        oversized_indices=oversized,
    )
