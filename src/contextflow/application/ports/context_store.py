"""Context store port."""

from typing import Protocol

from contextflow.domain.entities import ContextChunk
from contextflow.domain.value_objects import ContextSource


class ContextStore(Protocol):
    """Port for durable chunk persistence."""

    async def initialize(self) -> None: ...

    async def close(self) -> None: ...

    async def insert(self, chunk: ContextChunk) -> None: ...

    async def count(self) -> int: ...

    async def get_recent(
        self, source: ContextSource | None = None, limit: int = 50
    ) -> list[ContextChunk]: ...
