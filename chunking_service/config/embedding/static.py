"""Embedding profiles from static.json: loading, the active profile, and config resolution."""

import json
from pathlib import Path
from typing import Any

from chunking_service.config.embedding.models import EmbeddingConfig
from chunking_service.config.settings import get_settings

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, EmbeddingConfig] | None = None
_active_profile: str | None = None

MOCK_PROFILE = "mock_default"


def _load_raw_data() -> dict[str, Any]:
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_embedding_profiles() -> dict[str, EmbeddingConfig]:
    """Profiles keyed by name, validated once and cached for the process."""
    global _cached
    if _cached is None:
        profiles = _load_raw_data().get("profiles", {})
        _cached = {k: EmbeddingConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_active_profile_name() -> str:
    """
    Return the profile name marked as active in static.json, defaulting to 'sentence_default'.
    When settings.use_mock_embeddings is set, the mock profile wins.
    """
    global _active_profile
    if get_settings().use_mock_embeddings:
        return MOCK_PROFILE
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "sentence_default")
    return _active_profile


_STRATEGY_TO_PROFILE: dict[str, str] = {
    "openai": "openai_default",
    "sentence_transformers": "sentence_default",
    "bedrock": "bedrock_default",
    "mock": MOCK_PROFILE,
}


def resolve_embedding_config(
    profile_name: str,
    inline_config: dict[str, Any] | None = None,
) -> EmbeddingConfig:
    """
    Resolve embedding config by profile name and optional inline overrides.
    If inline_config is provided and non-empty, it is merged over the profile config.
    If profile_name is 'active', use the profile marked as active in static.json.
    Strategy names ('openai', 'sentence_transformers', ...) map to their *_default profiles.
    Raises ValueError if the profile is missing.
    """
    if profile_name == "active":
        name = get_active_profile_name()
    else:
        name = _STRATEGY_TO_PROFILE.get(profile_name, profile_name)
    base = load_embedding_profiles().get(name)
    if base is None:
        raise ValueError(f"Unknown embedding profile: {name!r}")
    if not inline_config:
        return base
    merged = {**base.model_dump(), **inline_config}
    return EmbeddingConfig.model_validate(merged)
