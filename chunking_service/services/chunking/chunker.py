"""
Chunker: takes raw text + ChunkingConfig and returns the ordered TextChunk list.
Normalizes the text, then routes to exactly one strategy by config.method.
"""

from chunking_service.config.chunking.models import ChunkingConfig
from chunking_service.config.logging import get_logger, log_extra
from chunking_service.config.settings import get_settings
from chunking_service.services.chunking.models import TextChunk
from chunking_service.services.chunking.strategies import AGENTIC_METHOD, get_strategy_fn
from chunking_service.services.chunking.strategies.agentic import agentic_chunks
from chunking_service.services.embedder.base import TextEmbedder

logger = get_logger(__name__)


def clean_for_chunking(text: str | None) -> str:
    """Trim surrounding whitespace. Chunk offsets refer to this cleaned text."""
    if not text:
        return ""
    return text.strip()


def chunk_text_sync(text: str, config: ChunkingConfig) -> list[TextChunk]:
    """
    Run one of the synchronous methods (fixed, sentence, paragraph, semantic).
    Raises ValueError for unknown methods and for agentic, which needs chunk_text.
    """
    strategy_fn = get_strategy_fn(config.method)
    if strategy_fn is None:
        if config.method == AGENTIC_METHOD:
            raise ValueError("Agentic chunking is asynchronous; use chunk_text with an embedder")
        raise ValueError(f"Unknown chunking method: {config.method!r}")
    cleaned = clean_for_chunking(text)
    chunks = strategy_fn(cleaned, config)
    logger.debug(
        "Chunked text",
        **log_extra({"method": config.method, "text_length": len(cleaned), "chunks": len(chunks)}),
    )
    return chunks


async def chunk_text(
    text: str,
    config: ChunkingConfig,
    embedder: TextEmbedder | None = None,
) -> list[TextChunk]:
    """
    Chunk text with any of the five methods. Agentic requires an embedder and never raises
    on provider or grouping failures (it returns []); the other methods raise ValueError for
    configuration errors.
    """
    if config.method != AGENTIC_METHOD:
        return chunk_text_sync(text, config)
    if embedder is None:
        raise ValueError("Agentic chunking requires an embedder")
    settings = get_settings()
    cleaned = clean_for_chunking(text)
    chunks = await agentic_chunks(
        cleaned,
        config,
        embedder,
        concurrency=settings.embedding_concurrency,
        timeout=settings.agentic_timeout_seconds,
    )
    logger.debug(
        "Chunked text",
        **log_extra({"method": config.method, "text_length": len(cleaned), "chunks": len(chunks)}),
    )
    return chunks
