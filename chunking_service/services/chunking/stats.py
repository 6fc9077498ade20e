"""Aggregate size statistics over a chunk list."""

import math

from pydantic import BaseModel, Field

from chunking_service.services.chunking.models import TextChunk


class ChunkingStats(BaseModel):
    total_chunks: int = Field(default=0, ge=0)
    average_chunk_size: int = Field(default=0, ge=0, description="Mean text length, rounded half up")
    min_chunk_size: int = Field(default=0, ge=0)
    max_chunk_size: int = Field(default=0, ge=0)
    total_text_length: int = Field(default=0, ge=0)


def chunking_stats(chunks: list[TextChunk]) -> ChunkingStats:
    """Sizes are len(chunk.text). All fields are 0 for an empty list."""
    if not chunks:
        return ChunkingStats()
    sizes = [len(c.text) for c in chunks]
    total = sum(sizes)
    return ChunkingStats(
        total_chunks=len(chunks),
        average_chunk_size=math.floor(total / len(chunks) + 0.5),
        min_chunk_size=min(sizes),
        max_chunk_size=max(sizes),
        total_text_length=total,
    )
