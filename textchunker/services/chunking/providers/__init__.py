"""Text-segmentation providers behind the library-backed chunking strategies."""

from textchunker.services.chunking.providers.base import BaseSegmentationProvider
from textchunker.services.chunking.providers.langchain_provider import LangChainSegmentationProvider

__all__ = ["BaseSegmentationProvider", "LangChainSegmentationProvider"]
