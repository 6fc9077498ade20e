"""Static chunking config loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from chunking_service.config.chunking.models import ChunkingConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, ChunkingConfig] | None = None
_cached_method_defaults: dict[str, ChunkingConfig] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON; used to read profiles, method defaults and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_chunking_profiles() -> dict[str, ChunkingConfig]:
    """Load named presets from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: ChunkingConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def load_method_defaults() -> dict[str, ChunkingConfig]:
    """Load per-method preview defaults from static.json. Keys are method names."""
    global _cached_method_defaults
    if _cached_method_defaults is not None:
        return _cached_method_defaults
    data = _load_raw_data()
    defaults = data.get("method_defaults", {})
    _cached_method_defaults = {k: ChunkingConfig.model_validate(v) for k, v in defaults.items()}
    return _cached_method_defaults


def get_chunking_config(profile_name: str) -> ChunkingConfig | None:
    """Return chunking config for the given preset or method name, or None if missing."""
    cfg = load_chunking_profiles().get(profile_name)
    if cfg is not None:
        return cfg
    return load_method_defaults().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'general_purpose' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "general_purpose")
    return _active_profile


def resolve_chunking_config(profile_name: str, inline_config: dict[str, Any] | None = None) -> ChunkingConfig:
    """
    Resolve chunking config by preset name, method name or "active", then merge inline overrides.
    Bare method names ("fixed", "semantic", ...) resolve to that method's preview defaults.
    Raises ValueError if the profile is unknown or the merged config is invalid.
    """
    name = get_active_profile_name() if profile_name == "active" else profile_name
    base = get_chunking_config(name)
    if base is None:
        raise ValueError(f"Unknown chunking profile or method: {name!r}")
    if not inline_config:
        return base
    merged = {**base.model_dump(), **inline_config}
    return ChunkingConfig.model_validate(merged)
