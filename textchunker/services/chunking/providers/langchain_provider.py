"""Segmentation provider backed by langchain-text-splitters."""

from typing import Callable

from langchain_text_splitters import (
    CharacterTextSplitter,
    MarkdownTextSplitter,
    RecursiveCharacterTextSplitter,
    TextSplitter,
    TokenTextSplitter,
)

from textchunker.config.chunking.models import ChunkerConfig
from textchunker.config.logging import get_logger
from textchunker.services.chunking.exceptions import ExternalSplitterError
from textchunker.services.chunking.providers.base import BaseSegmentationProvider

logger = get_logger(__name__)


class LangChainSegmentationProvider(BaseSegmentationProvider):
    """
    Pass-through to LangChain splitters. A new splitter is built per call from the
    resolved config; token splitting loads the tiktoken encoding named in the config.
    """

    @property
    def provider_name(self) -> str:
        return "langchain"

    def _run(self, operation: str, build: Callable[[], TextSplitter], text: str) -> list[str]:
        """Build the splitter and split; wrap any library failure once."""
        try:
            return build().split_text(text)
        except Exception as e:
            logger.warning(
                "Library splitter failed",
                extra={"operation": operation, "error_type": type(e).__name__},
            )
            raise ExternalSplitterError(f"{operation} splitting failed: {e}", cause=e) from e

    def split_recursive(self, text: str, config: ChunkerConfig) -> list[str]:
        return self._run(
            "recursive",
            lambda: RecursiveCharacterTextSplitter(
                chunk_size=config.chunk_size,
                chunk_overlap=config.chunk_overlap,
                separators=list(config.separators),
            ),
            text,
        )

    def split_fixed_separator(self, text: str, config: ChunkerConfig) -> list[str]:
        return self._run(
            "character",
            lambda: CharacterTextSplitter(
                separator=config.separator,
                chunk_size=config.chunk_size,
                chunk_overlap=config.chunk_overlap,
            ),
            text,
        )

    def split_tokens(self, text: str, config: ChunkerConfig) -> list[str]:
        return self._run(
            "token",
            lambda: TokenTextSplitter(
                encoding_name=config.encoding_name,
                chunk_size=config.chunk_size,
                chunk_overlap=config.chunk_overlap,
            ),
            text,
        )

    def split_markdown(self, text: str, config: ChunkerConfig) -> list[str]:
        return self._run(
            "markdown",
            lambda: MarkdownTextSplitter(
                chunk_size=config.chunk_size,
                chunk_overlap=config.chunk_overlap,
            ),
            text,
        )
