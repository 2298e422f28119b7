"""Producer endpoints - raw events and aggregate OCR captures."""

import falcon.asgi

from contextflow.application.use_cases.ingestion import ContextCollector
from contextflow.domain.entities import ContextChunk
from contextflow.domain.exceptions import ValidationError
from contextflow.domain.value_objects import ContextSource

EVENT_KINDS = ("generic", "event", "clipboard", "notification")


def _require_str(body: dict, key: str, default: str | None = None) -> str:
    value = body.get(key, default)
    if not isinstance(value, str):
        raise ValidationError(f"'{key}' must be a string")
    return value


def _optional_str(body: dict, key: str) -> str | None:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"'{key}' must be a string")
    return value


def _accepted(resp: falcon.asgi.Response, chunk: ContextChunk | None) -> None:
    resp.status = falcon.HTTP_202
    if chunk is None:
        resp.media = {"accepted": False}
        return
    resp.media = {
        "accepted": True,
        "id": str(chunk.id),
        "source": str(chunk.source),
        "topic": chunk.topic,
        "entities": [
            {"type": str(e.type), "value": e.value, "confidence": e.confidence}
            for e in chunk.entities
        ],
    }


class EventsResource:
    """POST /v1/events - submit one raw producer event."""

    def __init__(self, collector: ContextCollector) -> None:
        self._collector = collector

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await req.get_media()
            if not isinstance(body, dict):
                raise ValidationError("Body must be a JSON object")
            kind = _require_str(body, "kind", "generic")
            if kind not in EVENT_KINDS:
                raise ValidationError(f"Unknown event kind: {kind}")
            chunk = await self._dispatch(kind, body)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        _accepted(resp, chunk)

    async def _dispatch(self, kind: str, body: dict) -> ContextChunk | None:
        app = _require_str(body, "app", "")
        if kind == "notification":
            return await self._collector.collect_notification(
                _optional_str(body, "title"), _optional_str(body, "body"), app
            )
        text = _require_str(body, "text")
        if kind == "clipboard":
            return await self._collector.collect_clipboard(text, app)
        if kind == "event":
            return await self._collector.collect_event(
                text,
                app,
                element_role=_optional_str(body, "role"),
                action_type=_require_str(body, "action", ""),
            )
        metadata = body.get("metadata") or {}
        if not isinstance(metadata, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in metadata.items()
        ):
            raise ValidationError("'metadata' must map strings to strings")
        source = _optional_str(body, "source")
        try:
            source_tag = ContextSource(source) if source else None
        except ValueError as e:
            raise ValidationError(f"Unknown source: {source}") from e
        return await self._collector.collect(text, app, source=source_tag, metadata=metadata)


class CapturesResource:
    """POST /v1/captures - submit one aggregate OCR scan."""

    def __init__(self, collector: ContextCollector) -> None:
        self._collector = collector

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await req.get_media()
            if not isinstance(body, dict):
                raise ValidationError("Body must be a JSON object")
            text = _require_str(body, "text")
            app = _require_str(body, "app", "")
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        chunk = await self._collector.collect_aggregate_capture(text, app)
        _accepted(resp, chunk)
