"""
Embedding strategy registry. Strategy modules are imported on first use, so a process that only
runs the mock strategy never loads torch or a cloud SDK.
"""

import importlib
from functools import lru_cache

from chunking_service.services.embedder.base import BaseEmbeddingStrategy

_PACKAGE = __name__

STRATEGY_REGISTRY: dict[str, str] = {
    "openai": "openai_strategy:OpenAIEmbeddingStrategy",
    "sentence_transformers": "sentence_transformers_strategy:SentenceTransformersEmbeddingStrategy",
    "bedrock": "bedrock_strategy:BedrockEmbeddingStrategy",
    "mock": "mock_strategy:MockEmbeddingStrategy",
}


@lru_cache(maxsize=None)
def get_embedding_strategy(strategy_name: str) -> BaseEmbeddingStrategy | None:
    """
    Shared strategy instance for the name, or None if unregistered. Instances hold SDK clients
    and loaded models, so every provider using the same strategy reuses them.
    """
    target = STRATEGY_REGISTRY.get(strategy_name)
    if target is None:
        return None
    module_name, class_name = target.split(":")
    module = importlib.import_module(f"{_PACKAGE}.{module_name}")
    return getattr(module, class_name)()
