"""Equal-size chunking. Fixed-length character windows with optional overlap."""

from textchunker.config.chunking.models import ChunkerConfig
from textchunker.services.chunking.exceptions import InvalidConfigError
from textchunker.services.chunking.providers.base import BaseSegmentationProvider


def _check_window(chunk_size: int, overlap: int) -> None:
    if chunk_size <= 0:
        raise InvalidConfigError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0:
        raise InvalidConfigError(f"overlap must not be negative, got {overlap}")
    if overlap >= chunk_size:
        raise InvalidConfigError(
            f"overlap ({overlap}) must be smaller than chunk_size ({chunk_size})"
        )


def split_equal_size(text: str, chunk_size: int, overlap: int = 0) -> list[str]:
    """
    Split text into windows of chunk_size characters. Window i starts at
    i * (chunk_size - overlap); the last windows may be shorter. Stops once the
    start reaches the end of the text.
    """
    _check_window(chunk_size, overlap)
    step = chunk_size - overlap
    return [text[start : start + chunk_size] for start in range(0, len(text), step)]


def equal_size_chunks(text: str, config: ChunkerConfig, provider: BaseSegmentationProvider) -> list[str]:
    """Registry adapter: windows of config.chunk_size overlapping by config.chunk_overlap."""
    return split_equal_size(text, config.chunk_size, config.chunk_overlap)
