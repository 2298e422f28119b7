"""Health check endpoints."""

import falcon.asgi

from contextflow.application.use_cases.ingestion import ContextCollector


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, collector: ContextCollector) -> None:
        self._collector = collector

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (collector running)."""
        if self._collector.is_collecting:
            resp.media = {"status": "ready"}
            resp.status = falcon.HTTP_200
        else:
            resp.media = {"status": "not_ready", "error": self._collector.last_error}
            resp.status = falcon.HTTP_503
