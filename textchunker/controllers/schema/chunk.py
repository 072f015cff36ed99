"""Request/response schemas for the /chunk endpoints."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from textchunker.services.chunking.statistics import ChunkStatistics
from textchunker.services.chunking.validation import ValidationResult


class ChunkRequest(BaseModel):
    """POST /chunk request body. Unset parameters fall back to the selected profile."""

    text: str = Field(..., description="Text to chunk")
    strategy: str = Field(
        default="recursive",
        description="recursive|character|delimiter|token|markdown|semantic|equal_size|sentence",
    )
    profile: str = Field(default="active", description="Chunking profile supplying defaults")
    chunk_size: int | None = Field(default=None, description="Override for chunk size")
    chunk_overlap: int | None = Field(default=None, description="Override for overlap between chunks")
    separators: list[str] | None = Field(default=None, description="Override for recursive separators")
    separator: str | None = Field(default=None, description="Override for character separator")
    delimiter: str | None = Field(default=None, description="Delimiter for the delimiter strategy")
    encoding_name: str | None = Field(default=None, description="tiktoken encoding for the token strategy")
    max_size: int | None = Field(default=None, ge=0, description="Validate chunks against this bound when set")

    @model_validator(mode="after")
    def validate_delimiter(self):
        """The delimiter strategy needs a delimiter."""
        if self.strategy == "delimiter" and not self.delimiter:
            raise ValueError("delimiter is required for the delimiter strategy")
        return self

    def options(self) -> dict[str, Any]:
        """Per-call chunker overrides carried by this request."""
        return {
            "chunk_size": self.chunk_size,
            "chunk_overlap": self.chunk_overlap,
            "separators": self.separators,
            "separator": self.separator,
            "encoding_name": self.encoding_name,
        }


class ChunkResponse(BaseModel):
    """POST /chunk response body. Statistics are null when no chunks were produced."""

    strategy: str
    chunks: list[str] = Field(default_factory=list)
    statistics: ChunkStatistics | None = None
    validation: ValidationResult | None = None


class ValidateRequest(BaseModel):
    """POST /chunk/validate request body."""

    chunks: list[str] = Field(default_factory=list)
    max_size: int = Field(..., ge=0, description="Maximum allowed chunk length")


class StatsRequest(BaseModel):
    """POST /chunk/stats request body."""

    chunks: list[str] = Field(..., description="Chunks to measure; must not be empty")
