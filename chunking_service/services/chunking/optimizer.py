"""Quality pass over grouped chunks: coalesces runs of undersized chunks and re-embeds the merged text."""

from chunking_service.config.logging import get_logger
from chunking_service.services.chunking.models import TextChunk
from chunking_service.services.embedder.base import TextEmbedder

logger = get_logger(__name__)


async def optimize_chunks(chunks: list[TextChunk], min_chunk_size: int, embedder: TextEmbedder) -> list[TextChunk]:
    """
    Single left-to-right pass. Chunks shorter than min_chunk_size collect in a pending buffer
    (space-joined, re-embedded on every merge). A chunk that meets the minimum first releases the
    buffer, then is emitted unchanged. Any buffer left at the end is emitted last.
    """
    optimized: list[TextChunk] = []
    pending: TextChunk | None = None
    merges = 0

    for chunk in chunks:
        if len(chunk.text) >= min_chunk_size:
            if pending is not None:
                optimized.append(pending)
                pending = None
            optimized.append(chunk)
            continue
        if pending is None:
            pending = chunk
            continue
        merged_text = f"{pending.text} {chunk.text}"
        pending = pending.model_copy(
            update={
                "text": merged_text,
                "end_index": chunk.end_index,
                "embedding": await embedder.embed(merged_text),
            }
        )
        merges += 1

    if pending is not None:
        optimized.append(pending)

    logger.debug("Optimized chunks", extra={"input": len(chunks), "output": len(optimized), "merges": merges})
    return optimized
