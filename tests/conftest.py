"""
Shared pytest fixtures for all tests.
"""

from pathlib import Path

import pytest

from textchunker.config.chunking.models import ChunkerConfig
from textchunker.config.settings import get_settings
from textchunker.services.chunking.chunker import Chunker
from textchunker.services.chunking.providers.base import BaseSegmentationProvider


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    """Tests located in ``tests/unit`` get the ``unit`` marker."""
    root_path = Path(config.rootdir)
    for item in items:
        rel_path = Path(item.fspath).resolve().relative_to(root_path).as_posix()
        if rel_path.startswith("tests/unit/"):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep the developer's AWS and Bedrock environment out of the tests."""
    for name in (
        "AWS_REGION",
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "AWS_SESSION_TOKEN",
        "BEDROCK_MODEL_ID",
        "BEDROCK_MAX_TOKENS",
        "BEDROCK_TEMPERATURE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class RecordingProvider(BaseSegmentationProvider):
    """Segmentation provider that records each call and returns the text cut at chunk_size."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, ChunkerConfig]] = []

    @property
    def provider_name(self) -> str:
        return "recording"

    def _record(self, operation: str, text: str, config: ChunkerConfig) -> list[str]:
        self.calls.append((operation, text, config))
        return [text[: config.chunk_size]] if text else []

    def split_recursive(self, text, config):
        return self._record("recursive", text, config)

    def split_fixed_separator(self, text, config):
        return self._record("fixed_separator", text, config)

    def split_tokens(self, text, config):
        return self._record("tokens", text, config)

    def split_markdown(self, text, config):
        return self._record("markdown", text, config)


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def chunker(provider) -> Chunker:
    """Chunker with 150/50 defaults over the recording provider."""
    return Chunker(chunk_size=150, chunk_overlap=50, provider=provider)
