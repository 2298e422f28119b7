"""Embedding service port - OpenAI compatible API."""

from typing import Protocol


class EmbeddingService(Protocol):
    """Port for generating text embeddings."""

    @property
    def is_configured(self) -> bool: ...

    async def embed(self, text: str) -> list[float]: ...

    async def embed_batch(self, texts: list[str]) -> list[list[float]]: ...
