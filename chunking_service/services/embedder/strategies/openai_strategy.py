"""OpenAI Embedding API strategy."""

from typing import Any

from openai import OpenAI

from chunking_service.config.embedding.models import EmbeddingConfig
from chunking_service.config.settings import get_settings
from chunking_service.services.embedder.base import BaseEmbeddingStrategy

# Inputs per embeddings.create request accepted by the API
OPENAI_MAX_BATCH = 2048


class OpenAIEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    OpenAI Embeddings API (text-embedding-3-small by default). Key from config.api_key or
    settings.openai_api_key. config.dimension asks text-embedding-3 models for shortened vectors.
    """

    def __init__(self) -> None:
        self._client: OpenAI | None = None
        self._client_key: str | None = None

    @property
    def strategy_name(self) -> str:
        return "openai"

    def _client_for(self, api_key: str) -> OpenAI:
        if self._client is None or self._client_key != api_key:
            self._client = OpenAI(api_key=api_key)
            self._client_key = api_key
        return self._client

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        api_key = config.api_key or get_settings().openai_api_key
        if not api_key:
            raise ValueError("OpenAI API key is required (set in config or OPENAI_API_KEY)")
        client = self._client_for(api_key)
        request: dict[str, Any] = {"model": config.model}
        if config.dimension:
            request["dimensions"] = config.dimension

        step = min(config.batch_size, OPENAI_MAX_BATCH)
        vectors: list[list[float]] = []
        for offset in range(0, len(texts), step):
            batch = texts[offset : offset + step]
            response = client.embeddings.create(input=batch, **request)
            if len(response.data) != len(batch):
                raise ValueError(f"OpenAI returned {len(response.data)} embeddings for {len(batch)} inputs")
            vectors.extend(item.embedding for item in sorted(response.data, key=lambda item: item.index))
        return vectors
