"""Library-backed strategies. Thin adapters from registry calls to the segmentation provider."""

from textchunker.config.chunking.models import ChunkerConfig
from textchunker.services.chunking.providers.base import BaseSegmentationProvider

# Paragraphs, then lines, then sentence punctuation, then words
SEMANTIC_SEPARATORS: tuple[str, ...] = ("\n\n", "\n", ". ", "! ", "? ", " ", "")


def recursive_chunks(text: str, config: ChunkerConfig, provider: BaseSegmentationProvider) -> list[str]:
    return provider.split_recursive(text, config)


def character_chunks(text: str, config: ChunkerConfig, provider: BaseSegmentationProvider) -> list[str]:
    return provider.split_fixed_separator(text, config)


def delimiter_chunks(text: str, config: ChunkerConfig, provider: BaseSegmentationProvider) -> list[str]:
    """Same as character splitting; the caller puts the delimiter in config.separator."""
    return provider.split_fixed_separator(text, config)


def token_chunks(text: str, config: ChunkerConfig, provider: BaseSegmentationProvider) -> list[str]:
    return provider.split_tokens(text, config)


def markdown_chunks(text: str, config: ChunkerConfig, provider: BaseSegmentationProvider) -> list[str]:
    return provider.split_markdown(text, config)


def semantic_chunks(text: str, config: ChunkerConfig, provider: BaseSegmentationProvider) -> list[str]:
    """Recursive splitting that prefers paragraph, line and sentence boundaries over words."""
    return provider.split_recursive(text, config.model_copy(update={"separators": SEMANTIC_SEPARATORS}))
