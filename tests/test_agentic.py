"""Tests for embedding-driven chunking: analysis, grouping steps and failure handling."""

import pytest

from chunking_service.config.chunking.models import ChunkingConfig
from chunking_service.services.chunking.similarity import GroupAccumulator
from chunking_service.services.chunking.strategies.agentic import (
    agentic_chunks,
    analyze_document,
    embed_sentences,
    group_by_similarity,
    step_group,
)
from tests.fakes import (
    CATS,
    STOCKS,
    ConcurrencyTrackingEmbedder,
    FailingEmbedder,
    KeywordEmbedder,
    RaggedEmbedder,
    SlowEmbedder,
)

TEXT = "Cats purr softly. Cats sleep a lot. Stocks rose today. Stocks fell later."


@pytest.mark.asyncio()
async def test_groups_sentences_by_topic(keyword_embedder: KeywordEmbedder, agentic_config: ChunkingConfig) -> None:
    chunks = await agentic_chunks(TEXT, agentic_config, keyword_embedder)

    assert [c.text for c in chunks] == ["Cats purr softly. Cats sleep a lot.", "Stocks rose today. Stocks fell later."]
    assert [c.start_index for c in chunks] == [0, 35]
    assert chunks[0].embedding == CATS
    assert chunks[1].embedding == STOCKS
    assert all(c.metadata.chunk_type == "agentic" for c in chunks)


@pytest.mark.asyncio()
async def test_max_size_splits_similar_sentences(keyword_embedder: KeywordEmbedder) -> None:
    config = ChunkingConfig(method="agentic", max_chunk_size=20, min_chunk_size=0)

    chunks = await agentic_chunks(TEXT, config, keyword_embedder)

    assert len(chunks) == 4
    assert all(len(c.text) <= 20 for c in chunks)


@pytest.mark.asyncio()
async def test_small_groups_are_merged_and_reembedded(keyword_embedder: KeywordEmbedder) -> None:
    config = ChunkingConfig(method="agentic", max_chunk_size=1000, min_chunk_size=40)

    chunks = await agentic_chunks(TEXT, config, keyword_embedder)

    assert [c.text for c in chunks] == [TEXT]
    assert TEXT in keyword_embedder.calls
    assert chunks[0].embedding == CATS


@pytest.mark.asyncio()
async def test_provider_failure_returns_empty(agentic_config: ChunkingConfig) -> None:
    assert await agentic_chunks(TEXT, agentic_config, FailingEmbedder()) == []


@pytest.mark.asyncio()
async def test_dimension_mismatch_returns_empty(agentic_config: ChunkingConfig) -> None:
    assert await agentic_chunks(TEXT, agentic_config, RaggedEmbedder()) == []


@pytest.mark.asyncio()
async def test_timeout_returns_empty(agentic_config: ChunkingConfig) -> None:
    assert await agentic_chunks(TEXT, agentic_config, SlowEmbedder(delay=1.0), timeout=0.05) == []


@pytest.mark.asyncio()
async def test_empty_text_makes_no_embedding_calls(
    keyword_embedder: KeywordEmbedder, agentic_config: ChunkingConfig
) -> None:
    assert await agentic_chunks("", agentic_config, keyword_embedder) == []
    assert keyword_embedder.calls == []


@pytest.mark.asyncio()
async def test_embed_sentences_bounds_concurrency_and_keeps_order() -> None:
    embedder = ConcurrencyTrackingEmbedder()
    sentences = ["a" * n for n in range(1, 11)]

    vectors = await embed_sentences(sentences, embedder, concurrency=2)

    assert [v[0] for v in vectors] == [float(n) for n in range(1, 11)]
    assert embedder.max_in_flight <= 2


def test_analyze_document() -> None:
    config = ChunkingConfig(method="agentic", long_form_sentence_count=2)

    long_form = analyze_document(["A.", "B.", "C."], [CATS, CATS, STOCKS], config)
    short_form = analyze_document(["A.", "B."], [CATS, CATS], config)

    assert long_form.document_type == "long-form"
    assert long_form.complexity == 3
    assert long_form.semantic_coherence == pytest.approx(0.5)
    assert short_form.document_type == "short-form"
    assert short_form.semantic_coherence == pytest.approx(1.0)


def test_step_group_joins_similar_sentence(agentic_config: ChunkingConfig) -> None:
    group = GroupAccumulator.start_with("Cats purr.", CATS, 0)

    group, closed = step_group(group, "Cats nap.", CATS, agentic_config)

    assert closed is None
    assert group.text == "Cats purr. Cats nap."


def test_step_group_closes_on_dissimilar_sentence(agentic_config: ChunkingConfig) -> None:
    group = GroupAccumulator.start_with("Cats purr.", CATS, 0)

    group, closed = step_group(group, "Stocks rose.", STOCKS, agentic_config)

    assert closed is not None
    assert closed.text == "Cats purr."
    assert closed.embedding == CATS
    assert group.text == "Stocks rose."
    assert group.start == len("Cats purr.")


def test_group_by_similarity_rejects_mismatched_inputs(agentic_config: ChunkingConfig) -> None:
    with pytest.raises(ValueError):
        group_by_similarity(["A.", "B."], [CATS], agentic_config)
