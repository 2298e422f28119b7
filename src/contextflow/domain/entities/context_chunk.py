"""Context chunk entity - enriched unit of observed text."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

from contextflow.domain.entities.entity import Entity, dedupe_entities
from contextflow.domain.exceptions import ValidationError
from contextflow.domain.value_objects import ContextSource

MAX_CONTENT_LENGTH = 5000


@dataclass(frozen=True)
class ContextChunk:
    """Context chunk - immutable once accepted.

    Re-enrichment (e.g. attaching an embedding) produces a new value that
    shares the same id.
    """

    source: ContextSource
    content: str
    entities: tuple[Entity, ...] = ()
    topic: str | None = None
    embedding: tuple[float, ...] | None = None
    metadata: dict[str, str] = field(default_factory=dict)
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.content.strip():
            raise ValidationError("Chunk content must not be empty")
        if len(self.content) > MAX_CONTENT_LENGTH:
            raise ValidationError(
                f"Chunk content exceeds {MAX_CONTENT_LENGTH} characters"
            )
        object.__setattr__(self, "entities", tuple(dedupe_entities(list(self.entities))))

    def with_embedding(self, embedding: list[float] | None) -> "ContextChunk":
        """Return a copy of this chunk carrying the given embedding."""
        if embedding is None:
            return self
        return replace(self, embedding=tuple(embedding))

