"""PostgreSQL context store implementation (pgvector embeddings)."""

import logging

import psycopg
from psycopg.types.json import Jsonb
from psycopg_pool import AsyncConnectionPool

from contextflow.domain.entities import ContextChunk, Entity
from contextflow.domain.exceptions import StoreError, StoreInitializationError
from contextflow.domain.value_objects import ContextSource, EntityType

logger = logging.getLogger(__name__)

_COLUMNS = "id, timestamp, source, content, entities, topic, embedding::text, metadata"


def _vector_literal(embedding: tuple[float, ...] | None) -> str | None:
    if embedding is None:
        return None
    return "[" + ",".join(repr(float(x)) for x in embedding) + "]"


def _parse_vector(raw: str | None) -> tuple[float, ...] | None:
    if not raw:
        return None
    return tuple(float(x) for x in raw.strip("[]").split(",") if x)


def _row_to_chunk(row: tuple) -> ContextChunk:
    try:
        source = ContextSource(row[2])
    except ValueError:
        source = ContextSource.UNKNOWN
    entities = tuple(
        Entity(
            type=EntityType(e["type"]),
            value=e["value"],
            confidence=float(e.get("confidence", 1.0)),
        )
        for e in (row[4] or [])
    )
    return ContextChunk(
        id=row[0],
        timestamp=row[1],
        source=source,
        content=row[3],
        entities=entities,
        topic=row[5],
        embedding=_parse_vector(row[6]),
        metadata=dict(row[7] or {}),
    )


class PostgresContextStore:
    """Context store backed by the ``context_chunk`` table."""

    def __init__(self, pool: AsyncConnectionPool, open_timeout: float = 10.0) -> None:
        self._pool = pool
        self._open_timeout = open_timeout
        self._initialized = False

    async def initialize(self) -> None:
        """Open the pool and check the schema is migrated."""
        if self._initialized:
            return
        try:
            await self._pool.open(wait=True, timeout=self._open_timeout)
            async with self._pool.connection() as conn:
                await conn.execute("SELECT 1 FROM context_chunk LIMIT 1")
        except (psycopg.Error, OSError) as e:
            raise StoreInitializationError(f"Cannot open context store: {e}") from e
        self._initialized = True
        logger.info("Context store initialized")

    async def close(self) -> None:
        await self._pool.close()
        self._initialized = False

    async def insert(self, chunk: ContextChunk) -> None:
        """Insert chunk, replacing any row with the same id."""
        entities = [
            {"type": str(e.type), "value": e.value, "confidence": e.confidence}
            for e in chunk.entities
        ]
        try:
            async with self._pool.connection() as conn:
                await conn.execute(
                    "INSERT INTO context_chunk "
                    "(id, timestamp, source, content, entities, topic, embedding, metadata) "
                    "VALUES (%s, %s, %s, %s, %s, %s, %s::vector, %s) "
                    "ON CONFLICT (id) DO UPDATE SET "
                    "timestamp = EXCLUDED.timestamp, source = EXCLUDED.source, "
                    "content = EXCLUDED.content, entities = EXCLUDED.entities, "
                    "topic = EXCLUDED.topic, embedding = EXCLUDED.embedding, "
                    "metadata = EXCLUDED.metadata",
                    (
                        chunk.id,
                        chunk.timestamp,
                        str(chunk.source),
                        chunk.content,
                        Jsonb(entities),
                        chunk.topic,
                        _vector_literal(chunk.embedding),
                        Jsonb(chunk.metadata),
                    ),
                )
        except psycopg.Error as e:
            raise StoreError(f"Failed to insert chunk {chunk.id}: {e}") from e
        logger.debug("Inserted chunk: %s - %s", chunk.source, chunk.content[:50])

    async def count(self) -> int:
        try:
            async with self._pool.connection() as conn:
                cur = await conn.execute("SELECT COUNT(*) FROM context_chunk")
                row = await cur.fetchone()
        except psycopg.Error as e:
            raise StoreError(f"Failed to count chunks: {e}") from e
        return int(row[0]) if row else 0

    async def get_recent(
        self, source: ContextSource | None = None, limit: int = 50
    ) -> list[ContextChunk]:
        """Most recent chunks, optionally from one source."""
        if source is None:
            query = f"SELECT {_COLUMNS} FROM context_chunk ORDER BY timestamp DESC LIMIT %s"
            params: tuple = (limit,)
        else:
            query = (
                f"SELECT {_COLUMNS} FROM context_chunk WHERE source = %s "
                "ORDER BY timestamp DESC LIMIT %s"
            )
            params = (str(source), limit)
        try:
            async with self._pool.connection() as conn:
                cur = await conn.execute(query, params)
                rows = await cur.fetchall()
        except psycopg.Error as e:
            raise StoreError(f"Failed to read recent chunks: {e}") from e
        return [_row_to_chunk(r) for r in rows]

