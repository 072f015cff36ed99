"""Static chunking profiles and config resolution.

Precedence for every field: call-level option > chunker default > hard-coded
fallback (the ``ChunkerConfig`` field defaults).
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from textchunker.config.chunking.models import ChunkerConfig, ChunkerOptions
from textchunker.services.chunking.exceptions import InvalidConfigError

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, ChunkerConfig] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def _describe(exc: ValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def load_chunking_profiles() -> dict[str, ChunkerConfig]:
    """Load chunking profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: ChunkerConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_chunking_config(profile_name: str) -> ChunkerConfig | None:
    """Return chunking config for the given profile, or None if missing."""
    return load_chunking_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def resolve_profile(profile_name: str) -> ChunkerConfig:
    """Return the config for a profile name; 'active' means the profile marked active."""
    name = get_active_profile_name() if profile_name == "active" else profile_name
    cfg = get_chunking_config(name)
    if cfg is None:
        raise InvalidConfigError(f"Unknown chunking profile: {name!r}")
    return cfg


def resolve_chunker_config(
    base: ChunkerConfig,
    overrides: ChunkerOptions | dict[str, Any] | None = None,
    ignore_overlap: bool = False,
) -> ChunkerConfig:
    """
    Merge per-call overrides over a base config, field by field.
    None/missing override fields keep the base value. With ignore_overlap an
    inherited overlap is zeroed, for strategies that never overlap chunks; an
    overlap the caller passed is still validated.
    Raises InvalidConfigError when the overrides or the merged result are invalid.
    """
    if overrides is None:
        return base
    try:
        if not isinstance(overrides, ChunkerOptions):
            overrides = ChunkerOptions.model_validate(overrides)
        explicit = overrides.model_dump(exclude_none=True)
        if not explicit:
            return base
        merged = {**base.model_dump(), **explicit}
        if ignore_overlap and "chunk_overlap" not in explicit:
            merged["chunk_overlap"] = 0
        return ChunkerConfig.model_validate(merged)
    except ValidationError as e:
        raise InvalidConfigError(_describe(e)) from e
