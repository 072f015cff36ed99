"""Chunking strategy implementations, addressable by name."""

from typing import Callable

from textchunker.config.chunking.models import ChunkerConfig
from textchunker.services.chunking.providers.base import BaseSegmentationProvider
from textchunker.services.chunking.strategies.equal_size import equal_size_chunks
from textchunker.services.chunking.strategies.library import (
    character_chunks,
    delimiter_chunks,
    markdown_chunks,
    recursive_chunks,
    semantic_chunks,
    token_chunks,
)
from textchunker.services.chunking.strategies.sentence import sentence_chunks

StrategyFn = Callable[[str, ChunkerConfig, BaseSegmentationProvider], list[str]]

STRATEGY_REGISTRY: dict[str, StrategyFn] = {
    "recursive": recursive_chunks,
    "character": character_chunks,
    "delimiter": delimiter_chunks,
    "token": token_chunks,
    "markdown": markdown_chunks,
    "semantic": semantic_chunks,
    "equal_size": equal_size_chunks,
    "sentence": sentence_chunks,
}


# Strategies that never overlap chunks; a default overlap must not invalidate a small chunk_size
OVERLAP_FREE_STRATEGIES: frozenset[str] = frozenset({"sentence"})


def get_strategy_fn(strategy_name: str) -> StrategyFn | None:
    """Return the chunking function for the given strategy name, or None."""
    return STRATEGY_REGISTRY.get(strategy_name)
