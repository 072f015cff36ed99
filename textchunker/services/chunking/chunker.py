"""
Chunker: holds default chunking parameters and dispatches to local strategies
and to the library-backed segmentation provider.

Per-call options override the chunker's defaults field by field; the chunker's
defaults override the hard-coded fallbacks in ChunkerConfig.
"""

from typing import Any, Sequence

from textchunker.config.chunking.models import ChunkerConfig, ChunkerOptions
from textchunker.config.chunking.static import resolve_chunker_config, resolve_profile
from textchunker.config.logging import get_logger, log_extra
from textchunker.services.chunking.exceptions import InvalidConfigError
from textchunker.services.chunking.providers import BaseSegmentationProvider, LangChainSegmentationProvider
from textchunker.services.chunking.statistics import ChunkStatistics, compute_statistics
from textchunker.services.chunking.strategies import (
    OVERLAP_FREE_STRATEGIES,
    STRATEGY_REGISTRY,
    StrategyFn,
    get_strategy_fn,
)
from textchunker.services.chunking.strategies.equal_size import split_equal_size
from textchunker.services.chunking.validation import ValidationResult, validate_chunks

logger = get_logger(__name__)

Options = ChunkerOptions | dict[str, Any] | None


class Chunker:
    """Chunking facade. Stateless apart from its immutable default config."""

    def __init__(
        self,
        config: ChunkerConfig | None = None,
        provider: BaseSegmentationProvider | None = None,
        **defaults: Any,
    ) -> None:
        self._config = resolve_chunker_config(config or ChunkerConfig(), defaults or None)
        self._provider = provider or LangChainSegmentationProvider()

    @classmethod
    def from_profile(cls, profile_name: str = "active", provider: BaseSegmentationProvider | None = None) -> "Chunker":
        """Build a chunker whose defaults come from a static.json profile."""
        return cls(config=resolve_profile(profile_name), provider=provider)

    @property
    def config(self) -> ChunkerConfig:
        return self._config

    @property
    def provider(self) -> BaseSegmentationProvider:
        return self._provider

    def resolve(self, options: Options = None, ignore_overlap: bool = False) -> ChunkerConfig:
        """Merge per-call options over this chunker's defaults."""
        return resolve_chunker_config(self._config, options, ignore_overlap=ignore_overlap)

    def _log_split(self, strategy_name: str, text: str, chunks: list[str]) -> list[str]:
        logger.debug(
            "Split text",
            **log_extra({"strategy": strategy_name, "chunks": len(chunks), "chars": len(text)}),
        )
        return chunks

    def _run(self, strategy_name: str, fn: StrategyFn, text: str, config: ChunkerConfig) -> list[str]:
        return self._log_split(strategy_name, text, fn(text, config, self._provider))

    def split(self, strategy_name: str, text: str, options: Options = None) -> list[str]:
        """Split with the named strategy. Raises InvalidConfigError for unknown names."""
        fn = get_strategy_fn(strategy_name)
        if fn is None:
            raise InvalidConfigError(
                f"Unknown chunking strategy: {strategy_name!r} (known: {', '.join(sorted(STRATEGY_REGISTRY))})"
            )
        config = self.resolve(options, ignore_overlap=strategy_name in OVERLAP_FREE_STRATEGIES)
        return self._run(strategy_name, fn, text, config)

    # Library-backed strategies

    def split_recursive(self, text: str, options: Options = None) -> list[str]:
        """Recursive character splitting; the recommended default for prose."""
        return self.split("recursive", text, options)

    def split_character(self, text: str, options: Options = None) -> list[str]:
        return self.split("character", text, options)

    def split_token(self, text: str, options: Options = None) -> list[str]:
        """Split by token count so chunks fit model context limits."""
        return self.split("token", text, options)

    def split_markdown(self, text: str, options: Options = None) -> list[str]:
        return self.split("markdown", text, options)

    def split_semantic(self, text: str, options: Options = None) -> list[str]:
        return self.split("semantic", text, options)

    def split_delimiter(self, text: str, delimiter: str, options: Options = None) -> list[str]:
        """Split on an explicit delimiter, merging pieces up to chunk_size."""
        config = self.resolve(options).model_copy(update={"separator": delimiter})
        return self._run("delimiter", STRATEGY_REGISTRY["delimiter"], text, config)

    # Local strategies

    def split_equal_size(self, text: str, chunk_size: int | None = None, overlap: int = 0) -> list[str]:
        """Fixed-length windows. chunk_size defaults to this chunker's chunk_size."""
        size = self._config.chunk_size if chunk_size is None else chunk_size
        return self._log_split("equal_size", text, split_equal_size(text, size, overlap))

    def split_by_sentence(self, text: str, options: Options = None) -> list[str]:
        """Pack whole sentences up to chunk_size characters. Overlap does not apply."""
        return self.split("sentence", text, options)

    # Analysis

    def compute_statistics(self, chunks: Sequence[str]) -> ChunkStatistics:
        return compute_statistics(chunks)

    def validate(self, chunks: Sequence[str], max_size: int) -> ValidationResult:
        return validate_chunks(chunks, max_size)


default_chunker = Chunker(chunk_size=1000, chunk_overlap=200)
