"""
Embedding-driven chunking.

analyze (embed every sentence, measure coherence) → group sentences by similarity to the open
group's running mean → merge undersized groups. Any failure, including a provider error or the
optional deadline, yields an empty chunk list instead of an exception.
"""

import asyncio

from chunking_service.config.chunking.models import ChunkingConfig
from chunking_service.config.logging import get_logger
from chunking_service.services.chunking.models import ChunkMetadata, DocumentAnalysis, TextChunk
from chunking_service.services.chunking.optimizer import optimize_chunks
from chunking_service.services.chunking.similarity import (
    GroupAccumulator,
    cosine_similarity,
    mean_consecutive_similarity,
)
from chunking_service.services.chunking.strategies.sentence_based import split_sentences
from chunking_service.services.embedder.base import TextEmbedder

logger = get_logger(__name__)

DEFAULT_EMBEDDING_CONCURRENCY = 8


async def embed_sentences(
    sentences: list[str],
    embedder: TextEmbedder,
    concurrency: int = DEFAULT_EMBEDDING_CONCURRENCY,
) -> list[list[float]]:
    """Embed all sentences concurrently, at most `concurrency` in flight. Order is preserved."""
    semaphore = asyncio.Semaphore(max(1, concurrency))

    async def _embed(sentence: str) -> list[float]:
        async with semaphore:
            return await embedder.embed(sentence)

    return list(await asyncio.gather(*(_embed(s) for s in sentences)))


def analyze_document(
    sentences: list[str], embeddings: list[list[float]], config: ChunkingConfig
) -> DocumentAnalysis:
    complexity = len(sentences)
    return DocumentAnalysis(
        document_type="long-form" if complexity > config.long_form_sentence_count else "short-form",
        complexity=complexity,
        semantic_coherence=mean_consecutive_similarity(embeddings),
    )


def _close_group(group: GroupAccumulator) -> TextChunk:
    return TextChunk(
        text=group.text,
        start_index=group.start,
        end_index=group.end,
        metadata=ChunkMetadata(chunk_type="agentic", importance=1.0),
        embedding=group.mean(),
    )


def step_group(
    group: GroupAccumulator,
    sentence: str,
    embedding: list[float],
    config: ChunkingConfig,
) -> tuple[GroupAccumulator, TextChunk | None]:
    """
    One grouping decision. The sentence joins the open group when it fits within max_chunk_size and
    its similarity to the group's mean embedding exceeds the threshold. Otherwise the group is closed
    and returned, and a new group starts from the sentence.
    """
    similarity = cosine_similarity(group.mean(), embedding)
    if group.fits(sentence, config.max_chunk_size) and similarity > config.similarity_threshold:
        return group.append(sentence, embedding), None
    return GroupAccumulator.start_with(sentence, embedding, group.end), _close_group(group)


def group_by_similarity(
    sentences: list[str], embeddings: list[list[float]], config: ChunkingConfig
) -> list[TextChunk]:
    """Sequential similarity-threshold grouping; each decision depends on the previous ones."""
    if len(sentences) != len(embeddings):
        raise ValueError(f"Got {len(embeddings)} embeddings for {len(sentences)} sentences")
    chunks: list[TextChunk] = []
    group: GroupAccumulator | None = None
    for sentence, embedding in zip(sentences, embeddings):
        if group is None:
            group = GroupAccumulator.start_with(sentence, embedding, 0)
            continue
        group, closed = step_group(group, sentence, embedding, config)
        if closed is not None:
            chunks.append(closed)
    if group is not None:
        chunks.append(_close_group(group))
    return chunks


async def _run_agentic(
    text: str, config: ChunkingConfig, embedder: TextEmbedder, concurrency: int
) -> list[TextChunk]:
    sentences = split_sentences(text)
    if not sentences:
        return []
    embeddings = await embed_sentences(sentences, embedder, concurrency)
    analysis = analyze_document(sentences, embeddings, config)
    # Grouping is always similarity-threshold grouping; the analysis is informational
    logger.info(
        "Document analyzed",
        extra={
            "document_type": analysis.document_type,
            "complexity": analysis.complexity,
            "semantic_coherence": round(analysis.semantic_coherence, 4),
        },
    )
    grouped = group_by_similarity(sentences, embeddings, config)
    return await optimize_chunks(grouped, config.min_chunk_size, embedder)


async def agentic_chunks(
    text: str,
    config: ChunkingConfig,
    embedder: TextEmbedder,
    concurrency: int = DEFAULT_EMBEDDING_CONCURRENCY,
    timeout: float | None = None,
) -> list[TextChunk]:
    """
    Chunk text by sentence-embedding similarity. Returns [] on any failure (best effort):
    callers treat an empty result as "nothing usable", not as an error.
    """
    try:
        if timeout is not None:
            return await asyncio.wait_for(_run_agentic(text, config, embedder, concurrency), timeout)
        return await _run_agentic(text, config, embedder, concurrency)
    except Exception:
        logger.exception("Agentic chunking failed; returning no chunks", extra={"text_length": len(text)})
        return []
