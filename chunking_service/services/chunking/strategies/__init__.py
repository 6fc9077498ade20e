"""Chunking strategy implementations. The registry holds the synchronous, purely syntactic ones."""

from typing import Callable

from chunking_service.config.chunking.models import ChunkingConfig
from chunking_service.services.chunking.models import TextChunk
from chunking_service.services.chunking.strategies.fixed_size import fixed_size_chunks
from chunking_service.services.chunking.strategies.paragraph_based import paragraph_chunks
from chunking_service.services.chunking.strategies.semantic import semantic_chunks
from chunking_service.services.chunking.strategies.sentence_based import sentence_chunks

StrategyFn = Callable[[str, ChunkingConfig], list[TextChunk]]

STRATEGY_REGISTRY: dict[str, StrategyFn] = {
    "fixed": fixed_size_chunks,
    "sentence": sentence_chunks,
    "paragraph": paragraph_chunks,
    "semantic": semantic_chunks,
}

# Needs an embedder and runs asynchronously; dispatched separately
AGENTIC_METHOD = "agentic"


def get_strategy_fn(method: str) -> StrategyFn | None:
    """Return the chunking function for the given method name, or None."""
    return STRATEGY_REGISTRY.get(method)
