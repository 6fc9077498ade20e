"""POST /chunk: chunk one text with the requested method and report stats. GET /chunk/presets."""

from typing import Any, Callable

from fastapi import APIRouter, Depends, HTTPException

from chunking_service.config.chunking.static import (
    get_active_profile_name,
    load_chunking_profiles,
    resolve_chunking_config,
)
from chunking_service.config.logging import get_logger
from chunking_service.controllers.schema.chunk import ChunkRequest, ChunkResponse, PresetsResponse
from chunking_service.services.chunking.chunker import chunk_text
from chunking_service.services.chunking.stats import chunking_stats
from chunking_service.services.chunking.strategies import AGENTIC_METHOD
from chunking_service.services.embedder.base import TextEmbedder
from chunking_service.services.embedder.provider import get_embedding_provider

logger = get_logger(__name__)

router = APIRouter(prefix="/chunk", tags=["chunking"])

EmbedderFactory = Callable[[], TextEmbedder]


def get_embedder_factory() -> EmbedderFactory:
    """
    Builds the embedder on demand, so only agentic requests load the provider.
    Overridden in tests.
    """
    return get_embedding_provider


def _request_overrides(body: ChunkRequest) -> dict[str, Any]:
    overrides: dict[str, Any] = {"method": body.method}
    for field in ("max_chunk_size", "overlap_size", "min_chunk_size"):
        value = getattr(body, field)
        if value is not None:
            overrides[field] = value
    return overrides


def _embedder_for(method: str, make_embedder: EmbedderFactory) -> TextEmbedder | None:
    if method != AGENTIC_METHOD:
        return None
    try:
        return make_embedder()
    except ValueError as e:
        logger.error("Embedding provider unavailable", extra={"error": str(e)})
        raise HTTPException(status_code=503, detail="Embedding provider is not configured") from e


@router.post("", response_model=ChunkResponse)
async def chunk_document(
    body: ChunkRequest,
    make_embedder: EmbedderFactory = Depends(get_embedder_factory),
) -> ChunkResponse:
    """
    Chunk the posted text. Sizes come from the named preset, or from the method's preview
    defaults in static.json; explicit sizes in the body override both.
    """
    try:
        config = resolve_chunking_config(body.profile or body.method, _request_overrides(body))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    embedder = _embedder_for(config.method, make_embedder)
    try:
        chunks = await chunk_text(body.text, config, embedder)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    stats = chunking_stats(chunks)
    logger.info(
        "Chunk preview served",
        extra={"method": config.method, "total_chunks": stats.total_chunks},
    )
    return ChunkResponse(success=True, chunks=chunks, stats=stats, config=config)


@router.get("/presets", response_model=PresetsResponse)
async def list_presets() -> PresetsResponse:
    return PresetsResponse(active=get_active_profile_name(), presets=load_chunking_profiles())
