"""Fixed-size character chunking with overlap and a soft word-boundary cut."""

from chunking_service.config.chunking.models import ChunkingConfig
from chunking_service.config.logging import get_logger
from chunking_service.services.chunking.models import ChunkMetadata, TextChunk

logger = get_logger(__name__)

# A space is only used as the cut point if it lies in the last 20% of the window
WORD_BOUNDARY_WINDOW = 0.8


def fixed_size_chunks(text: str, config: ChunkingConfig) -> list[TextChunk]:
    """
    Split text into windows of at most max_chunk_size characters.

    A full window advances by max_chunk_size - overlap_size. A window cut early at a space
    advances to actual_end - overlap_size instead, so the characters after the cut start the
    next window. Every step moves at least one character, so overlap_size >= max_chunk_size
    still terminates. The window that reaches the end of the text is the last one.
    """
    if not text:
        return []
    size = config.max_chunk_size
    overlap = config.overlap_size
    if overlap >= size:
        logger.warning(
            "Overlap is not smaller than chunk size; advancing one character per chunk",
            extra={"max_chunk_size": size, "overlap_size": overlap},
        )
    chunks: list[TextChunk] = []
    start = 0
    while start < len(text):
        end = min(start + size, len(text))
        actual_end = end
        if end < len(text):
            last_space = text.rfind(" ", 0, end + 1)
            if last_space > start + size * WORD_BOUNDARY_WINDOW:
                actual_end = last_space
        chunk_text = text[start:actual_end].strip()
        if chunk_text:
            chunks.append(
                TextChunk(
                    text=chunk_text,
                    start_index=start,
                    end_index=actual_end,
                    metadata=ChunkMetadata(chunk_type="fixed", importance=1.0),
                )
            )
        if actual_end >= len(text):
            break
        start = max(actual_end - overlap, start + 1)
    return chunks
