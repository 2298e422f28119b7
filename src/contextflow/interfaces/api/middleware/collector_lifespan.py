"""Collector lifespan middleware - starts collecting on startup, flushes and closes on shutdown."""

from typing import Any

from contextflow.application.use_cases.ingestion import ContextCollector


class CollectorLifespanMiddleware:
    """Middleware that starts the collector on startup and stops it on shutdown."""

    def __init__(self, collector: ContextCollector) -> None:
        self._collector = collector

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Start collecting when ASGI server starts (fails startup if the store is down)."""
        await self._collector.start()

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Final flush and store release when ASGI server shuts down."""
        await self._collector.close()
