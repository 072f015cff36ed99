import pytest

from textchunker.config.chunking.models import DEFAULT_SEPARATORS, ChunkerConfig, ChunkerOptions
from textchunker.config.chunking.static import (
    get_active_profile_name,
    load_chunking_profiles,
    resolve_chunker_config,
    resolve_profile,
)
from textchunker.config.settings import Settings
from textchunker.services.chunking.exceptions import InvalidConfigError


def test_hard_coded_fallbacks():
    config = ChunkerConfig()
    assert config.chunk_size == 1000
    assert config.chunk_overlap == 200
    assert config.separators == DEFAULT_SEPARATORS
    assert config.separator == "\n"
    assert config.encoding_name == "cl100k_base"


def test_override_beats_base_field_by_field():
    base = ChunkerConfig(chunk_size=150, chunk_overlap=50)
    merged = resolve_chunker_config(base, {"chunk_size": 300})
    assert merged.chunk_size == 300
    assert merged.chunk_overlap == 50
    assert merged.separators == DEFAULT_SEPARATORS


def test_explicit_zero_overlap_is_honored():
    base = ChunkerConfig(chunk_size=150, chunk_overlap=50)
    assert resolve_chunker_config(base, {"chunk_overlap": 0}).chunk_overlap == 0


def test_none_fields_fall_through():
    base = ChunkerConfig(chunk_size=150, chunk_overlap=50)
    assert resolve_chunker_config(base, ChunkerOptions(chunk_size=None)) is base
    assert resolve_chunker_config(base, None) is base


def test_camel_case_option_names_accepted():
    merged = resolve_chunker_config(ChunkerConfig(), {"chunkSize": 400, "chunkOverlap": 10})
    assert (merged.chunk_size, merged.chunk_overlap) == (400, 10)


@pytest.mark.parametrize(
    "overrides",
    [
        {"chunk_size": 0},
        {"chunk_overlap": -1},
        {"chunk_size": 100, "chunk_overlap": 100},
        {"chunk_size": 100},  # base overlap 200 no longer fits
        {"chunk_sise": 10},
    ],
)
def test_invalid_merge_rejected(overrides):
    with pytest.raises(InvalidConfigError):
        resolve_chunker_config(ChunkerConfig(), overrides)


def test_ignore_overlap_zeroes_merged_overlap():
    merged = resolve_chunker_config(ChunkerConfig(), {"chunk_size": 4}, ignore_overlap=True)
    assert merged.chunk_size == 4
    assert merged.chunk_overlap == 0


def test_config_is_immutable():
    config = ChunkerConfig()
    with pytest.raises(Exception):
        config.chunk_size = 5


def test_profiles_load_from_static_json():
    profiles = load_chunking_profiles()
    assert {"default", "compact", "tokens"} <= set(profiles)
    assert profiles["compact"].chunk_size == 150
    assert profiles["compact"].chunk_overlap == 50
    assert get_active_profile_name() == "default"
    assert resolve_profile("active") == profiles["default"]


def test_unknown_profile_rejected():
    with pytest.raises(InvalidConfigError):
        resolve_profile("missing")


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("AWS_REGION", "us-west-2")
    monkeypatch.setenv("BEDROCK_MAX_TOKENS", "64")
    settings = Settings()
    assert settings.aws_region == "us-west-2"
    assert settings.bedrock_max_tokens == 64
    assert settings.bedrock_model_id == "eu.amazon.nova-pro-v1:0"


def test_ignore_overlap_keeps_caller_overlap():
    merged = resolve_chunker_config(ChunkerConfig(), {"chunk_size": 10, "chunk_overlap": 3}, ignore_overlap=True)
    assert merged.chunk_overlap == 3
    with pytest.raises(InvalidConfigError):
        resolve_chunker_config(ChunkerConfig(), {"chunk_size": 10, "chunk_overlap": -1}, ignore_overlap=True)
