"""
EmbeddingProvider: adapts a batch embedding strategy to the single-text async TextEmbedder contract.
preprocess → strategy (worker thread) → normalize. One provider per resolved profile is cached.
"""

import asyncio
import re
from functools import lru_cache

from chunking_service.config.embedding.models import EmbeddingConfig, EmbeddingPreprocessing
from chunking_service.config.embedding.static import resolve_embedding_config
from chunking_service.config.logging import get_logger
from chunking_service.config.settings import get_settings
from chunking_service.services.embedder.base import BaseEmbeddingStrategy
from chunking_service.services.embedder.normalization import normalize_vector, resolve_norm_type
from chunking_service.services.embedder.strategies import get_embedding_strategy

logger = get_logger(__name__)


def preprocess_text(text: str, opts: EmbeddingPreprocessing) -> str:
    """Lowercase, strip punctuation and truncate to max_length characters, as configured."""
    if not text:
        return ""
    s = text
    if opts.lowercase:
        s = s.lower()
    if opts.remove_punctuation:
        s = re.sub(r"[^\w\s]", "", s, flags=re.UNICODE)
    if len(s) > opts.max_length:
        s = s[: opts.max_length]
    return s


class EmbeddingProvider:
    """Single-text async embedder backed by a synchronous batch strategy."""

    def __init__(self, strategy: BaseEmbeddingStrategy, config: EmbeddingConfig) -> None:
        self._strategy = strategy
        self._config = config
        self._norm_type = resolve_norm_type(config.normalize, config.normalization_type)

    @property
    def config(self) -> EmbeddingConfig:
        return self._config

    async def embed(self, text: str) -> list[float]:
        processed = preprocess_text(text, self._config.preprocessing)
        # SDK clients and local models are blocking; keep them off the event loop
        vectors = await asyncio.to_thread(self._strategy.embed, [processed], self._config)
        if len(vectors) != 1:
            raise ValueError(f"Strategy returned {len(vectors)} vectors but expected 1")
        return normalize_vector(vectors[0], self._norm_type)


def build_embedding_provider(config: EmbeddingConfig) -> EmbeddingProvider:
    """Instantiate the strategy named by config and wrap it. Raises ValueError for unknown strategies."""
    strategy = get_embedding_strategy(config.strategy)
    if strategy is None:
        raise ValueError(f"Unknown embedding strategy: {config.strategy!r}")
    logger.info(
        "Embedding provider ready",
        extra={"strategy": strategy.strategy_name, "model": config.model},
    )
    return EmbeddingProvider(strategy, config)


@lru_cache(maxsize=8)
def _provider_for_profile(profile_name: str) -> EmbeddingProvider:
    return build_embedding_provider(resolve_embedding_config(profile_name))


def get_embedding_provider() -> EmbeddingProvider:
    """Return the cached provider for settings.embedding_profile. Used as a FastAPI dependency."""
    return _provider_for_profile(get_settings().embedding_profile)
