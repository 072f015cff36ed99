"""Chunking configuration models. Read-only; no business logic."""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200
DEFAULT_SEPARATORS: tuple[str, ...] = ("\n\n", "\n", " ", "")
DEFAULT_SEPARATOR = "\n"
DEFAULT_ENCODING_NAME = "cl100k_base"


class ChunkerConfig(BaseModel):
    """Resolved chunking parameters. Field defaults are the hard-coded fallbacks."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1, description="Target chunk size")
    chunk_overlap: int = Field(default=DEFAULT_CHUNK_OVERLAP, ge=0, description="Overlap between chunks")
    separators: tuple[str, ...] = Field(
        default=DEFAULT_SEPARATORS, description="Ordered separators for recursive splitting"
    )
    separator: str = Field(default=DEFAULT_SEPARATOR, description="Separator for plain-character splitting")
    encoding_name: str = Field(default=DEFAULT_ENCODING_NAME, description="tiktoken encoding for token splitting")

    @model_validator(mode="after")
    def validate_overlap(self):
        """Overlap must leave room for the window to advance."""
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than chunk_size ({self.chunk_size})"
            )
        return self


class ChunkerOptions(BaseModel):
    """Per-call overrides. Fields left as None fall back to the chunker's defaults."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    chunk_size: int | None = None
    chunk_overlap: int | None = None
    separators: list[str] | None = None
    separator: str | None = None
    encoding_name: str | None = None
