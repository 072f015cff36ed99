import pytest

from textchunker.services.chunking.chunker import Chunker, default_chunker
from textchunker.services.chunking.exceptions import EmptyInputError, InvalidConfigError
from textchunker.services.chunking.strategies.library import SEMANTIC_SEPARATORS


def test_defaults_from_constructor(chunker):
    assert chunker.config.chunk_size == 150
    assert chunker.config.chunk_overlap == 50


def test_default_chunker_settings():
    assert default_chunker.config.chunk_size == 1000
    assert default_chunker.config.chunk_overlap == 200


def test_invalid_constructor_defaults_rejected(provider):
    with pytest.raises(InvalidConfigError):
        Chunker(chunk_size=10, chunk_overlap=10, provider=provider)


def test_from_profile(provider):
    chunker = Chunker.from_profile("compact", provider=provider)
    assert chunker.config.chunk_size == 150
    assert chunker.provider is provider


def test_recursive_uses_merged_config(chunker, provider):
    chunker.split_recursive("some text", {"chunk_size": 300})
    operation, text, config = provider.calls[-1]
    assert operation == "recursive"
    assert text == "some text"
    assert config.chunk_size == 300
    assert config.chunk_overlap == 50


def test_character_and_delimiter(chunker, provider):
    chunker.split_character("a\nb")
    assert provider.calls[-1][2].separator == "\n"
    chunker.split_delimiter("a|b", "|", {"chunk_overlap": 0})
    operation, _, config = provider.calls[-1]
    assert operation == "fixed_separator"
    assert config.separator == "|"
    assert config.chunk_overlap == 0


def test_token_and_markdown(chunker, provider):
    chunker.split_token("tokens here", {"encoding_name": "p50k_base", "chunk_size": 100, "chunk_overlap": 20})
    assert provider.calls[-1][0] == "tokens"
    assert provider.calls[-1][2].encoding_name == "p50k_base"
    chunker.split_markdown("# Title")
    assert provider.calls[-1][0] == "markdown"


def test_semantic_uses_sentence_separators(chunker, provider):
    chunker.split_semantic("One. Two.", {"separators": ["x"]})
    operation, _, config = provider.calls[-1]
    assert operation == "recursive"
    assert config.separators == SEMANTIC_SEPARATORS


def test_dispatch_by_name(chunker, provider):
    assert chunker.split("equal_size", "abcdefghij", {"chunk_size": 4, "chunk_overlap": 1}) == [
        "abcd",
        "defg",
        "ghij",
        "j",
    ]
    chunker.split("recursive", "text")
    assert provider.calls[-1][0] == "recursive"


def test_unknown_strategy_rejected(chunker):
    with pytest.raises(InvalidConfigError):
        chunker.split("paragraphs", "text")


def test_invalid_options_fail_before_provider_call(chunker, provider):
    with pytest.raises(InvalidConfigError):
        chunker.split_recursive("text", {"chunk_size": 40})  # default overlap 50 too large
    assert provider.calls == []


def test_equal_size_defaults_to_instance_chunk_size(provider):
    chunker = Chunker(chunk_size=4, chunk_overlap=1, provider=provider)
    assert chunker.split_equal_size("abcdefgh") == ["abcd", "efgh"]
    assert chunker.split_equal_size("abcdefghij", 4, 1) == ["abcd", "defg", "ghij", "j"]


def test_sentence_ignores_default_overlap(chunker):
    # instance overlap (50) would be invalid with chunk_size 4 if it applied
    assert chunker.split_by_sentence("A. B. C.", {"chunkSize": 4}) == ["A.", "B.", "C."]


def test_sentence_uses_instance_size(provider):
    chunker = Chunker(chunk_size=9, chunk_overlap=0, provider=provider)
    assert chunker.split_by_sentence("One. Two! Three?") == ["One. Two!", "Three?"]


def test_statistics_and_validation(chunker):
    assert chunker.compute_statistics(["ab", "abcd"]).average_chunk_size == 3
    assert chunker.validate(["ab", "abcdef"], 3).oversized_indices == [1]
    with pytest.raises(EmptyInputError):
        chunker.compute_statistics([])


class TestLangChainBackedChunker:
    """Runs the library-backed strategies against langchain-text-splitters."""

    text = " ".join(f"Sentence number {i} talks about chunking." for i in range(40))

    def test_recursive_respects_chunk_size(self):
        chunker = Chunker(chunk_size=100, chunk_overlap=0)
        chunks = chunker.split_recursive(self.text)
        assert len(chunks) > 1
        assert all(len(c) <= 100 for c in chunks)
        assert "Sentence number 0" in chunks[0]
        assert "Sentence number 39" in " ".join(chunks)

    def test_semantic_respects_chunk_size(self):
        chunks = Chunker(chunk_size=120, chunk_overlap=0).split_semantic(self.text)
        assert len(chunks) > 1
        assert all(len(c) <= 120 for c in chunks)

    def test_character_splits_on_separator(self):
        text = "\n".join(f"line {i}" for i in range(30))
        chunks = Chunker(chunk_size=30, chunk_overlap=0).split_character(text)
        assert len(chunks) > 1
        assert all(len(c) <= 30 for c in chunks)

    def test_delimiter(self):
        text = "|".join(f"part{i}" for i in range(20))
        chunks = Chunker(chunk_size=20, chunk_overlap=0).split_delimiter(text, "|")
        assert len(chunks) > 1
        assert all("part" in c for c in chunks)

    def test_markdown(self):
        text = "# Title\n\nIntro paragraph.\n\n## Section\n\nBody text for the section.\n\n- item 1\n- item 2"
        chunks = Chunker(chunk_size=40, chunk_overlap=0).split_markdown(text)
        assert len(chunks) > 1
        assert all(len(c) <= 40 for c in chunks)
        assert chunks[0].startswith("# Title")

    def test_empty_text(self):
        assert Chunker(chunk_size=100, chunk_overlap=0).split_recursive("") == []


@pytest.mark.parametrize("overlap", [-5, 4, 9])
def test_sentence_rejects_explicit_invalid_overlap(chunker, overlap):
    with pytest.raises(InvalidConfigError):
        chunker.split_by_sentence("A. B. C.", {"chunk_size": 4, "chunk_overlap": overlap})


def test_sentence_accepts_explicit_valid_overlap(chunker):
    assert chunker.split("sentence", "A. B. C.", {"chunk_size": 4, "chunk_overlap": 1}) == ["A.", "B.", "C."]
