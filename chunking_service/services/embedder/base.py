"""Embedding contracts: batch strategies and the single-text embedder the chunkers depend on."""

from abc import ABC, abstractmethod
from typing import Protocol

from chunking_service.config.embedding.models import EmbeddingConfig


class TextEmbedder(Protocol):
    """
    What the agentic chunker and the optimizer need: one text in, one vector out.
    Implementations must be safe to call concurrently and return vectors of a fixed dimension.
    """

    async def embed(self, text: str) -> list[float]: ...


class BaseEmbeddingStrategy(ABC):
    """
    Abstract embedding strategy. Each strategy produces vectors with consistent dimension
    and does not perform normalization (handled by EmbeddingProvider).
    """

    @abstractmethod
    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        """
        Embed a list of texts. Returns one vector per text in the same order.
        Caller is responsible for preprocessing and normalization.
        """
        ...

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'openai', 'sentence_transformers'."""
        ...
