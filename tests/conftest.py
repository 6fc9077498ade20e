"""Shared fixtures: a keyword embedder, an agentic config, and an API client with the embedder overridden."""

import pytest
from fastapi.testclient import TestClient

from chunking_service.config.chunking.models import ChunkingConfig
from chunking_service.controllers.routes.chunk import get_embedder_factory
from chunking_service.main import app
from tests.fakes import KeywordEmbedder


@pytest.fixture()
def keyword_embedder() -> KeywordEmbedder:
    return KeywordEmbedder()


@pytest.fixture()
def agentic_config() -> ChunkingConfig:
    return ChunkingConfig(method="agentic", max_chunk_size=1000, min_chunk_size=0)


@pytest.fixture()
def client(keyword_embedder: KeywordEmbedder):
    app.dependency_overrides[get_embedder_factory] = lambda: lambda: keyword_embedder
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
