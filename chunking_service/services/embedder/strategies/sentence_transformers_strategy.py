"""Sentence Transformers (local) embedding strategy."""

import threading

from sentence_transformers import SentenceTransformer

from chunking_service.config.embedding.models import EmbeddingConfig
from chunking_service.services.embedder.base import BaseEmbeddingStrategy


class SentenceTransformersEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Local Sentence Transformers, mean pooled. Default model: sentence-transformers/all-MiniLM-L6-v2.
    No API key required; the model is downloaded on first use and kept for the strategy's lifetime.
    """

    def __init__(self) -> None:
        self._model: SentenceTransformer | None = None
        self._model_name: str | None = None
        # Provider calls arrive from several worker threads at once
        self._load_lock = threading.Lock()

    @property
    def strategy_name(self) -> str:
        return "sentence_transformers"

    def _get_model(self, model_name: str) -> SentenceTransformer:
        with self._load_lock:
            if self._model is None or self._model_name != model_name:
                self._model = SentenceTransformer(model_name)
                self._model_name = model_name
            return self._model

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        model = self._get_model(config.model)
        vectors = model.encode(
            texts,
            batch_size=config.batch_size,
            show_progress_bar=False,
            convert_to_numpy=True,
        )
        return [v.tolist() for v in vectors]
