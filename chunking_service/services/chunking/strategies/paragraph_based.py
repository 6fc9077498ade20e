"""Paragraph chunking. Packs blank-line separated paragraphs up to max_chunk_size."""

import re

from chunking_service.config.chunking.models import ChunkingConfig
from chunking_service.services.chunking.models import ChunkMetadata, TextChunk

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
PARAGRAPH_JOINER = "\n\n"


def paragraph_chunks(text: str, config: ChunkingConfig) -> list[TextChunk]:
    """Same accumulate-and-flush policy as sentence chunking, joining paragraphs with a blank line."""
    if not text:
        return []
    max_size = config.max_chunk_size
    chunks: list[TextChunk] = []
    buf = ""
    start = 0
    for paragraph in PARAGRAPH_BREAK.split(text):
        paragraph = paragraph.strip()
        if not paragraph:
            continue
        if buf and len(buf) + len(paragraph) > max_size:
            chunks.append(_paragraph_chunk(buf, start))
            start += len(buf)
            buf = paragraph
        else:
            buf = f"{buf}{PARAGRAPH_JOINER}{paragraph}" if buf else paragraph
    if buf:
        chunks.append(_paragraph_chunk(buf, start))
    return chunks


def _paragraph_chunk(buf: str, start: int) -> TextChunk:
    return TextChunk(
        text=buf,
        start_index=start,
        end_index=start + len(buf),
        metadata=ChunkMetadata(chunk_type="paragraph", importance=1.0),
    )
