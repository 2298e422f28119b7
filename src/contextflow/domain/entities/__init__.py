"""Domain entities."""

from contextflow.domain.entities.context_chunk import MAX_CONTENT_LENGTH, ContextChunk
from contextflow.domain.entities.entity import Entity, dedupe_entities

__all__ = [
    "MAX_CONTENT_LENGTH",
    "ContextChunk",
    "Entity",
    "dedupe_entities",
]
