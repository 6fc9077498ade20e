"""Request/response schemas for the chunking preview endpoints."""

from pydantic import BaseModel, Field

from chunking_service.config.chunking.models import ChunkingConfig, ChunkingMethod
from chunking_service.services.chunking.models import TextChunk
from chunking_service.services.chunking.stats import ChunkingStats


class ChunkRequest(BaseModel):
    """POST /chunk request body. Method defaults come from static.json unless a preset is named."""

    text: str = Field(..., min_length=1, max_length=1_000_000, description="Raw text to chunk")
    method: ChunkingMethod = Field(..., description="fixed|sentence|paragraph|semantic|agentic")
    profile: str | None = Field(default=None, description="Optional preset name, e.g. resume_optimized")
    max_chunk_size: int | None = Field(default=None, ge=1, le=100_000)
    overlap_size: int | None = Field(default=None, ge=0, le=100_000)
    min_chunk_size: int | None = Field(default=None, ge=0, le=100_000)


class ChunkResponse(BaseModel):
    """POST /chunk response body: chunks, their size stats and the config actually used."""

    success: bool = Field(default=True)
    chunks: list[TextChunk] = Field(default_factory=list)
    stats: ChunkingStats
    config: ChunkingConfig


class PresetsResponse(BaseModel):
    active: str
    presets: dict[str, ChunkingConfig]
