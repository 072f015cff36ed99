"""Sentence chunking. Greedily packs whole sentences into chunks up to chunk_size characters."""

import re

from textchunker.config.chunking.models import ChunkerConfig
from textchunker.services.chunking.exceptions import InvalidConfigError
from textchunker.services.chunking.providers.base import BaseSegmentationProvider

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def _split_sentences(text: str) -> list[str]:
    """Split on whitespace that follows '.', '!' or '?'."""
    return [s.strip() for s in _SENTENCE_BOUNDARY.split(text) if s.strip()]


def split_by_sentence(text: str, chunk_size: int) -> list[str]:
    """
    Accumulate sentences joined by a single space while the joined length stays
    within chunk_size. A sentence that alone exceeds chunk_size is emitted as its
    own chunk, unsplit.
    """
    if chunk_size <= 0:
        raise InvalidConfigError(f"chunk_size must be positive, got {chunk_size}")
    if not text or not text.strip():
        return []
    chunks: list[str] = []
    current = ""
    for sentence in _split_sentences(text):
        candidate = f"{current} {sentence}" if current else sentence
        if len(candidate) <= chunk_size:
            current = candidate
            continue
        if current:
            chunks.append(current)
        current = sentence
    if current:
        chunks.append(current)
    return chunks


def sentence_chunks(text: str, config: ChunkerConfig, provider: BaseSegmentationProvider) -> list[str]:
    """Registry adapter: sentence packing bounded by config.chunk_size."""
    return split_by_sentence(text, config.chunk_size)
