"""Collector status endpoint."""

import falcon.asgi

from contextflow.application.use_cases.ingestion import ContextCollector


class StatusResource:
    """GET /v1/status - collecting flag, counters, stored rows, last error."""

    def __init__(self, collector: ContextCollector) -> None:
        self._collector = collector

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        status = self._collector.status()
        stored = await self._collector.stored_count() if status.is_collecting else None
        resp.media = {
            "state": str(status.state),
            "collecting": status.is_collecting,
            "chunks_collected": status.chunks_collected,
            "pending": status.pending,
            "stored": stored,
            "last_error": status.last_error,
        }
        resp.status = falcon.HTTP_200
