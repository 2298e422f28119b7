"""Pytest fixtures for ContextFlow tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from contextflow.application.dto import CollectorConfig
from contextflow.application.use_cases.ingestion import ContextCollector
from contextflow.domain.entities import ContextChunk, Entity
from contextflow.domain.exceptions import EmbeddingError, StoreError, StoreInitializationError
from contextflow.domain.value_objects import ContextSource


# --- Fake collaborators ---


class FakeContextStore:
    """In-memory context store."""

    def __init__(self, fail_initialize: bool = False) -> None:
        self.fail_initialize = fail_initialize
        self.initialized = False
        self.closed = False
        self.fail_reads = False
        self.chunks: list[ContextChunk] = []
        self.fail_contents: set[str] = set()

    async def initialize(self) -> None:
        if self.fail_initialize:
            raise StoreInitializationError("database unavailable")
        self.initialized = True

    async def close(self) -> None:
        self.closed = True

    async def insert(self, chunk: ContextChunk) -> None:
        if chunk.content in self.fail_contents:
            raise StoreError(f"insert failed for {chunk.id}")
        self.chunks.append(chunk)

    async def count(self) -> int:
        if self.fail_reads:
            raise StoreError("count failed")
        return len(self.chunks)

    async def get_recent(
        self, source: ContextSource | None = None, limit: int = 50
    ) -> list[ContextChunk]:
        if self.fail_reads:
            raise StoreError("read failed")
        items = [c for c in self.chunks if source is None or c.source == source]
        return list(reversed(items))[:limit]

    @property
    def contents(self) -> list[str]:
        return [c.content for c in self.chunks]


class FakeEmbeddingService:
    """Embedding service recording batch calls."""

    def __init__(self, configured: bool = True, dimensions: int = 8) -> None:
        self.configured = configured
        self.dimensions = dimensions
        self.fail = False
        self.max_vectors: int | None = None
        self.batch_calls: list[list[str]] = []
        self.single_calls: list[str] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def embed(self, text: str) -> list[float]:
        self.single_calls.append(text)
        if self.fail:
            raise EmbeddingError("embedding backend down")
        return [0.5] * self.dimensions

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        self.batch_calls.append(list(texts))
        if self.fail:
            raise EmbeddingError("embedding backend down")
        vectors = [[float(i)] * self.dimensions for i in range(len(texts))]
        if self.max_vectors is not None:
            vectors = vectors[: self.max_vectors]
        return vectors


class FakeProfileLearner:
    """Profile learner that treats a fixed set of names as the user."""

    def __init__(self, my_names: set[str] | None = None) -> None:
        self.my_names = {n.lower() for n in (my_names or set())}
        self.learned: list[Entity] = []

    def is_me(self, value: str) -> bool:
        return value.lower() in self.my_names

    def learn_from_entities(self, entities: list[Entity]) -> None:
        self.learned.extend(entities)


# --- Fixtures ---


@pytest.fixture
def store() -> FakeContextStore:
    return FakeContextStore()


@pytest.fixture
def embedding_service() -> FakeEmbeddingService:
    return FakeEmbeddingService()


@pytest.fixture
def profile_learner() -> FakeProfileLearner:
    return FakeProfileLearner({"Filip Wnęk"})


@pytest.fixture
def collector_config() -> CollectorConfig:
    """Short batch delay so time-based flushes are quick to observe."""
    return CollectorConfig(batch_delay=0.05)


@pytest.fixture
def collector(store, embedding_service, profile_learner, collector_config) -> ContextCollector:
    return ContextCollector(
        store=store,
        embedding_service=embedding_service,
        profile_learner=profile_learner,
        config=collector_config,
    )


@pytest.fixture
def mock_tagger():
    """MagicMock NameTagger returning no spans."""
    mock = MagicMock()
    mock.tag.return_value = []
    return mock

