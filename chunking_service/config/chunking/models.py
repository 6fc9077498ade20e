"""Chunking configuration models. Read-only; no business logic."""

from typing import Literal

from pydantic import BaseModel, Field

ChunkingMethod = Literal["fixed", "sentence", "paragraph", "semantic", "agentic"]

CHUNKING_METHODS: tuple[str, ...] = ("fixed", "sentence", "paragraph", "semantic", "agentic")


class ChunkingConfig(BaseModel):
    """Chunking method and parameters. Sizes are measured in characters."""

    method: ChunkingMethod = Field(..., description="fixed|sentence|paragraph|semantic|agentic")
    max_chunk_size: int = Field(default=1000, gt=0, description="Upper size bound for a chunk")
    overlap_size: int = Field(default=100, ge=0, description="Trailing characters repeated (fixed only)")
    min_chunk_size: int = Field(default=200, ge=0, description="Lower size target (semantic/agentic only)")
    similarity_threshold: float = Field(
        default=0.5, ge=-1.0, le=1.0, description="Cosine similarity needed to join a group (agentic only)"
    )
    long_form_sentence_count: int = Field(
        default=10, ge=1, description="Sentence count above which a document is long-form (agentic only)"
    )
