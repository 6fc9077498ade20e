"""Mock embedding strategy for tests and offline runs. Produces deterministic fake vectors."""

import hashlib

from chunking_service.config.embedding.models import EmbeddingConfig
from chunking_service.services.embedder.base import BaseEmbeddingStrategy

# Default dimension for mock when neither config.dimension nor the model name says otherwise
MOCK_DEFAULT_DIM = 384


def _mock_dimension(config: EmbeddingConfig) -> int:
    if config.dimension:
        return config.dimension
    if "3-large" in config.model:
        return 3072
    if "ada-002" in config.model or "3-small" in config.model:
        return 1536
    return MOCK_DEFAULT_DIM


class MockEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Deterministic fake embeddings: SHA-256 of the text seeds each component, so the same
    text maps to the same vector across processes. Components lie in [-0.5, 0.5).
    """

    @property
    def strategy_name(self) -> str:
        return "mock"

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        dim = _mock_dimension(config)
        result: list[list[float]] = []
        for t in texts:
            seed = hashlib.sha256(t.encode("utf-8")).digest()
            vec = [((seed[j % len(seed)] + j * 31) % 256) / 256.0 - 0.5 for j in range(dim)]
            result.append(vec)
        return result
