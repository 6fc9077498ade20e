"""Sentence-boundary chunking. Packs whole sentences up to max_chunk_size."""

import re

from chunking_service.config.chunking.models import ChunkingConfig
from chunking_service.services.chunking.models import ChunkMetadata, TextChunk

# A sentence ends at . ! or ? followed by whitespace and an upper-case letter
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z])")


def split_sentences(text: str) -> list[str]:
    """Split on sentence boundaries; returns trimmed, non-empty sentences."""
    if not text or not text.strip():
        return []
    return [s.strip() for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def sentence_chunks(text: str, config: ChunkingConfig) -> list[TextChunk]:
    """
    Accumulate sentences into a space-joined buffer; flush it when the next sentence would push
    it past max_chunk_size. An oversized sentence becomes its own chunk, never split.
    Offsets advance by buffer length, so they drift once whitespace between sentences was reflowed.
    """
    max_size = config.max_chunk_size
    chunks: list[TextChunk] = []
    buf = ""
    start = 0
    for sentence in split_sentences(text):
        if buf and len(buf) + len(sentence) > max_size:
            chunks.append(_sentence_chunk(buf, start))
            start += len(buf)
            buf = sentence
        else:
            buf = f"{buf} {sentence}" if buf else sentence
    if buf.strip():
        chunks.append(_sentence_chunk(buf, start))
    return chunks


def _sentence_chunk(buf: str, start: int) -> TextChunk:
    return TextChunk(
        text=buf.strip(),
        start_index=start,
        end_index=start + len(buf),
        metadata=ChunkMetadata(chunk_type="sentence", importance=1.0),
    )
