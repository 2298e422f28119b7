"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from contextflow.application.use_cases.ingestion import ContextCollector
from contextflow.interfaces.api.middleware.collector_lifespan import CollectorLifespanMiddleware
from contextflow.interfaces.api.resources.chunks import RecentChunksResource
from contextflow.interfaces.api.resources.events import CapturesResource, EventsResource
from contextflow.interfaces.api.resources.health import HealthResource
from contextflow.interfaces.api.resources.status import StatusResource


def create_app(collector: ContextCollector, manage_lifespan: bool = True) -> App:
    """Create Falcon ASGI app with routes bound to one collector."""
    middleware = [CollectorLifespanMiddleware(collector)] if manage_lifespan else []
    app = falcon.asgi.App(middleware=middleware)
    health = HealthResource(collector)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/status", StatusResource(collector))
    app.add_route("/v1/events", EventsResource(collector))
    app.add_route("/v1/captures", CapturesResource(collector))
    app.add_route("/v1/chunks", RecentChunksResource(collector))
    return app
