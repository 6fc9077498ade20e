"""Config models for the embedding provider used by agentic chunking."""

from typing import Literal

from pydantic import BaseModel, Field


class EmbeddingPreprocessing(BaseModel):
    """Applied to each sentence or merged chunk before the strategy sees it."""

    lowercase: bool = False
    remove_punctuation: bool = False
    max_length: int = Field(default=8192, ge=1, description="Characters kept before truncation")


class EmbeddingConfig(BaseModel):
    strategy: str = Field(..., description="Registered strategy name: openai|sentence_transformers|bedrock|mock")
    model: str = Field(..., min_length=1)
    normalize: bool = True
    normalization_type: Literal["L2", "L1", "none"] = "L2"
    preprocessing: EmbeddingPreprocessing = Field(default_factory=EmbeddingPreprocessing)
    batch_size: int = Field(default=100, ge=1, description="Texts per SDK request")
    dimension: int | None = Field(default=None, ge=1, description="Vector size for the mock strategy")
    # Credentials fall back to Settings when unset
    api_key: str | None = None
    region: str | None = None
