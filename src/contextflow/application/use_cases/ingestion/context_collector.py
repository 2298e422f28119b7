"""Context collector - filter, deduplicate, enrich, batch, embed, persist.

All collector state (dedup caches, pending batch, counters) is owned by the
asyncio event loop the collector runs on. Every public method must be
awaited on that loop; producers on other threads go through
``asyncio.run_coroutine_threadsafe``. Because mutation of state never spans
an ``await``, no further locking is needed.
"""

import asyncio
import logging
from collections.abc import Mapping

from contextflow.application.dto import CollectorConfig, CollectorStatus
from contextflow.application.ports import ContextStore, EmbeddingService, ProfileLearner
from contextflow.application.services import (
    Deduplicator,
    EntityExtractor,
    NoiseFilter,
    TopicClassifier,
)
from contextflow.domain.entities import ContextChunk
from contextflow.domain.exceptions import StoreError, StoreInitializationError
from contextflow.domain.value_objects import CollectorState, ContextSource, EntityType

logger = logging.getLogger(__name__)


def _preview(text: str, size: int = 50) -> str:
    return text[:size].replace("\n", " ")


class ContextCollector:
    """Single owner of ingestion state.

    Construct once at the composition root and pass by reference to every
    producer.
    """

    def __init__(
        self,
        store: ContextStore,
        embedding_service: EmbeddingService,
        profile_learner: ProfileLearner | None = None,
        extractor: EntityExtractor | None = None,
        classifier: TopicClassifier | None = None,
        config: CollectorConfig | None = None,
    ) -> None:
        self._config = config or CollectorConfig()
        self._store = store
        self._embedding = embedding_service
        self._profile = profile_learner
        self._filter = NoiseFilter(self._config.filter)
        self._dedup = Deduplicator(self._config.dedup)
        self._extractor = extractor or EntityExtractor(confidence=self._config.confidence)
        self._classifier = classifier or TopicClassifier()

        self._state = CollectorState.IDLE
        self._pending: list[ContextChunk] = []
        self._generation = 0
        self._timer: asyncio.Task | None = None
        self._inflight: set[asyncio.Task] = set()
        self._chunks_collected = 0
        self._last_error: str | None = None

    # --- Observable state ---

    @property
    def is_collecting(self) -> bool:
        return self._state == CollectorState.COLLECTING

    @property
    def chunks_collected(self) -> int:
        return self._chunks_collected

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def status(self) -> CollectorStatus:
        return CollectorStatus(
            state=self._state,
            chunks_collected=self._chunks_collected,
            pending=len(self._pending),
            last_error=self._last_error,
        )

    # --- Lifecycle ---

    async def start(self) -> None:
        """Idle -> Collecting. Raises StoreInitializationError if the store fails."""
        if self.is_collecting:
            return
        try:
            await self._store.initialize()
        except Exception as e:
            self._last_error = str(e)
            logger.error("Context store initialization failed: %s", e)
            if isinstance(e, StoreInitializationError):
                raise
            raise StoreInitializationError(str(e)) from e
        self._state = CollectorState.COLLECTING
        logger.info("Context collector started")

    async def stop(self) -> None:
        """Flush pending chunks once, then Collecting -> Idle."""
        if not self.is_collecting:
            return
        self._cancel_timer()
        snapshot = self._take_snapshot()
        self._state = CollectorState.IDLE
        await self.join()
        if snapshot:
            await self._process_batch(snapshot)
        logger.info("Context collector stopped")

    async def join(self) -> None:
        """Wait for flushes already in flight."""
        while self._inflight:
            await asyncio.gather(*list(self._inflight))

    async def close(self) -> None:
        """Final flush, then release the store. The collector cannot restart afterwards."""
        await self.stop()
        await self._store.close()
        logger.info("Context store closed")

    # --- Stored chunks ---

    async def stored_count(self) -> int | None:
        """Rows in the store, or None when the store cannot answer."""
        try:
            return await self._store.count()
        except StoreError as e:
            logger.warning("Failed to count stored chunks: %s", e)
            return None

    async def recent(
        self, source: ContextSource | None = None, limit: int = 50
    ) -> list[ContextChunk]:
        """Most recently stored chunks. Raises StoreError if the store fails."""
        return await self._store.get_recent(source, limit)

    # --- Producers ---

    async def collect(
        self,
        text: str,
        app_name: str,
        source: ContextSource | None = None,
        metadata: Mapping[str, str] | None = None,
        min_length: int | None = None,
    ) -> ContextChunk | None:
        """Generic event path. Returns the accepted chunk, or None if rejected."""
        if not self.is_collecting:
            return None
        min_length = self._config.min_length if min_length is None else min_length
        if len(text) < min_length or not text.strip():
            logger.debug("Skip: too short or blank (%d chars)", len(text))
            return None
        if self._filter.is_rejected(text):
            logger.debug("Skip: filtered: %s", _preview(text))
            return None
        if self._dedup.is_duplicate(text):
            logger.debug("Skip: duplicate: %s", _preview(text))
            return None
        self._dedup.remember(text)

        chunk = ContextChunk(
            source=source or ContextSource.from_app_name(app_name),
            content=text,
            entities=tuple(self._extractor.extract(text)),
            topic=self._classifier.classify(text, app_name),
            metadata={"app": app_name, **(metadata or {})},
        )
        self._enqueue(chunk)
        return chunk

    async def collect_event(
        self,
        text: str,
        app_name: str,
        element_role: str | None = None,
        action_type: str = "",
    ) -> ContextChunk | None:
        """Accessibility / user-action event."""
        return await self.collect(
            text,
            app_name,
            metadata={"role": element_role or "", "action": action_type},
        )

    async def collect_clipboard(self, text: str, app_name: str = "") -> ContextChunk | None:
        return await self.collect(
            text,
            app_name,
            source=ContextSource.CLIPBOARD,
            min_length=self._config.min_clipboard_length,
        )

    async def collect_notification(
        self, title: str | None, body: str | None, app_name: str
    ) -> ContextChunk | None:
        content = ": ".join(part for part in (title, body) if part)
        app = app_name.strip().lower()
        if app == "discord":
            source = ContextSource.DISCORD
        elif app == "slack":
            source = ContextSource.SLACK
        else:
            source = ContextSource.NOTIFICATION
        return await self.collect(
            content,
            app_name,
            source=source,
            min_length=self._config.min_notification_length,
        )

    async def collect_aggregate_capture(self, text: str, app_name: str) -> ContextChunk | None:
        """Whole-screen OCR scan: embedded and persisted immediately, bypassing batching."""
        if not self.is_collecting:
            logger.debug("OCR skip: not collecting")
            return None
        if len(text) < self._config.min_capture_length or not text.strip():
            logger.debug("OCR skip: too short or blank (%d chars)", len(text))
            return None
        if self._filter.is_rejected(text, capture=True):
            logger.debug("OCR skip: filtered")
            return None
        if self._dedup.is_duplicate(text, fuzzy=False):
            logger.debug("OCR skip: duplicate hash")
            return None
        self._dedup.remember(text, fuzzy=False)

        entities = self._extractor.extract(text)
        if self._profile is not None:
            entities = [
                e
                for e in entities
                if not (e.type == EntityType.PERSON and self._profile.is_me(e.value))
            ]
            if entities:
                self._profile.learn_from_entities(entities)
        chunk = ContextChunk(
            source=ContextSource.OCR,
            content=text,
            entities=tuple(entities),
            topic=self._classifier.classify(text, app_name),
            metadata={"app": app_name, "capture_type": "ocr_aggregate"},
        )
        if entities:
            logger.info(
                "OCR entities: %s",
                ", ".join(f"{e.type}: {e.value}" for e in chunk.entities),
            )

        enriched = chunk
        if self._embedding.is_configured:
            try:
                enriched = chunk.with_embedding(await self._embedding.embed(text))
            except Exception as e:
                self._last_error = str(e)
                logger.warning("OCR embedding failed, saving without: %s", e)
        else:
            logger.warning("Embedding service not configured, saving OCR capture without")

        if await self._persist(enriched):
            self._chunks_collected += 1
            logger.info("OCR capture saved from %s: %s", app_name, _preview(text))
        return enriched

    # --- Batching ---

    def _enqueue(self, chunk: ContextChunk) -> None:
        starts_window = not self._pending
        self._pending.append(chunk)
        self._chunks_collected += 1
        if len(self._pending) >= self._config.batch_size:
            self._dispatch_flush()
        elif starts_window:
            self._generation += 1
            self._timer = asyncio.create_task(self._flush_after_delay(self._generation))

    async def _flush_after_delay(self, generation: int) -> None:
        await asyncio.sleep(self._config.batch_delay)
        if generation != self._generation or not self.is_collecting:
            return
        self._timer = None
        self._dispatch_flush()

    def _cancel_timer(self) -> None:
        if self._timer is not None and self._timer is not asyncio.current_task():
            self._timer.cancel()
        self._timer = None

    def _take_snapshot(self) -> list[ContextChunk]:
        snapshot = self._pending
        self._pending = []
        self._generation += 1
        return snapshot

    def _dispatch_flush(self) -> None:
        self._cancel_timer()
        snapshot = self._take_snapshot()
        if not snapshot:
            return
        task = asyncio.create_task(self._process_batch(snapshot))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _process_batch(self, chunks: list[ContextChunk]) -> None:
        logger.info("Processing batch of %d chunks", len(chunks))
        vectors: list[list[float]] = []
        if not self._embedding.is_configured:
            logger.warning("Embedding service not configured, storing %d chunks without", len(chunks))
        else:
            try:
                vectors = await self._embedding.embed_batch([c.content for c in chunks])
            except Exception as e:
                self._last_error = str(e)
                logger.warning("Batch embedding failed, storing without: %s", e)
            else:
                if len(vectors) < len(chunks):
                    logger.warning(
                        "Embedding service returned %d of %d vectors",
                        len(vectors),
                        len(chunks),
                    )

        stored = 0
        for i, chunk in enumerate(chunks):
            enriched = chunk.with_embedding(vectors[i]) if i < len(vectors) else chunk
            if await self._persist(enriched):
                stored += 1
        logger.info(
            "Stored %d/%d chunks (%d with embeddings)",
            stored,
            len(chunks),
            min(len(vectors), len(chunks)),
        )

    async def _persist(self, chunk: ContextChunk) -> bool:
        try:
            await self._store.insert(chunk)
        except Exception as e:
            self._last_error = str(e)
            logger.warning("Failed to store chunk %s: %s", chunk.id, e)
            return False
        return True
