"""OpenAI-compatible embedding service."""

import logging

from openai import AsyncOpenAI, OpenAIError

from contextflow.domain.exceptions import EmbeddingError, EmbeddingNotConfigured

logger = logging.getLogger(__name__)

MAX_INPUT_CHARS = 30000


class OpenAIEmbeddingService:
    """Embedding service using OpenAI-compatible API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        timeout: float = 60.0,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._client = (
            AsyncOpenAI(base_url=base_url, api_key=api_key, timeout=timeout)
            if api_key
            else None
        )

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def embed(self, text: str) -> list[float]:
        """Generate embedding for a single text."""
        if not text:
            raise EmbeddingError("Cannot embed empty text")
        vectors = await self.embed_batch([text])
        if not vectors:
            raise EmbeddingError("Embedding response contained no vectors")
        return vectors[0]

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for texts, ordered as the input."""
        if self._client is None:
            raise EmbeddingNotConfigured("Embedding API key is not set")
        if not texts:
            return []
        try:
            response = await self._client.embeddings.create(
                model=self._model,
                input=[t[:MAX_INPUT_CHARS] for t in texts],
            )
        except OpenAIError as e:
            raise EmbeddingError(f"Embedding request failed: {e}") from e
        data = sorted(response.data, key=lambda d: d.index)
        logger.debug("Embedded %d texts with %s", len(data), self._model)
        return [d.embedding for d in data]
