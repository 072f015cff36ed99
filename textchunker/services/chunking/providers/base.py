"""Base text-segmentation provider: the library-backed splitting capability behind the chunker."""

from abc import ABC, abstractmethod

from textchunker.config.chunking.models import ChunkerConfig


class BaseSegmentationProvider(ABC):
    """
    Abstract segmentation provider. Each method receives an already-resolved config
    and returns chunks in document order. Failures are raised as ExternalSplitterError
    and never recovered here.
    """

    @abstractmethod
    def split_recursive(self, text: str, config: ChunkerConfig) -> list[str]:
        """Split on config.separators in order, falling back to finer separators."""
        ...

    @abstractmethod
    def split_fixed_separator(self, text: str, config: ChunkerConfig) -> list[str]:
        """Split on the single config.separator and merge pieces up to chunk_size."""
        ...

    @abstractmethod
    def split_tokens(self, text: str, config: ChunkerConfig) -> list[str]:
        """Split by token count using config.encoding_name."""
        ...

    @abstractmethod
    def split_markdown(self, text: str, config: ChunkerConfig) -> list[str]:
        """Split along markdown structure (headings, code fences, rules)."""
        ...

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Provider identifier, e.g. 'langchain'."""
        ...
