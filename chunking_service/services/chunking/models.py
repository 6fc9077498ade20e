"""Chunk records produced by the strategies, plus the internal span and analysis value types."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class ChunkMetadata(BaseModel):
    chunk_type: str = Field(..., description="Producing method: fixed|sentence|paragraph|semantic|agentic")
    section: str | None = Field(default=None, description="Span type the chunk was built from (semantic)")
    importance: float = Field(default=1.0, ge=0.0, le=1.0)


class TextChunk(BaseModel):
    """
    One chunk of the input. start_index/end_index point into the normalized input; they are exact
    for fixed chunks and best-effort (additive) for the other methods.
    """

    text: str
    start_index: int = Field(..., ge=0)
    end_index: int = Field(..., ge=0)
    metadata: ChunkMetadata
    embedding: list[float] | None = None


class SpanType(str, Enum):
    HEADER = "header"
    LIST = "list"
    CODE = "code"
    TABLE = "table"
    QUOTE = "quote"
    DEFINITION = "definition"
    CONTENT = "content"


@dataclass(frozen=True)
class Span:
    """Typed region [start, end) of the source text found by the structural segmenter."""

    start: int
    end: int
    type: SpanType
    importance: float


DocumentType = Literal["long-form", "short-form"]


@dataclass(frozen=True)
class DocumentAnalysis:
    document_type: DocumentType
    complexity: int
    semantic_coherence: float
