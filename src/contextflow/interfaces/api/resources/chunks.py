"""Recently stored chunks."""

import falcon
import falcon.asgi

from contextflow.application.use_cases.ingestion import ContextCollector
from contextflow.domain.entities import ContextChunk
from contextflow.domain.exceptions import StoreError
from contextflow.domain.value_objects import ContextSource

MAX_LIMIT = 200


def _chunk_to_dict(chunk: ContextChunk) -> dict:
    return {
        "id": str(chunk.id),
        "timestamp": chunk.timestamp.isoformat(),
        "source": str(chunk.source),
        "content": chunk.content,
        "topic": chunk.topic,
        "entities": [
            {"type": str(e.type), "value": e.value, "confidence": e.confidence}
            for e in chunk.entities
        ],
        "has_embedding": chunk.embedding is not None,
        "metadata": chunk.metadata,
    }


class RecentChunksResource:
    """GET /v1/chunks?source=&limit= - newest stored chunks first."""

    def __init__(self, collector: ContextCollector) -> None:
        self._collector = collector

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        limit = req.get_param_as_int("limit", min_value=1, max_value=MAX_LIMIT, default=50)
        raw_source = req.get_param("source")
        try:
            source = ContextSource(raw_source) if raw_source else None
        except ValueError:
            raise falcon.HTTPBadRequest(description=f"Unknown source: {raw_source}") from None
        try:
            chunks = await self._collector.recent(source, limit)
        except StoreError as e:
            raise falcon.HTTPServiceUnavailable(description=str(e)) from e
        resp.media = {"chunks": [_chunk_to_dict(c) for c in chunks]}
        resp.status = falcon.HTTP_200
