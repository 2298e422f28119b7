"""Entity - typed value recognized in observed text."""

from dataclasses import dataclass

from contextflow.domain.exceptions import ValidationError
from contextflow.domain.value_objects import EntityType


@dataclass(frozen=True)
class Entity:
    """Named entity with a confidence score in [0, 1]."""

    type: EntityType
    value: str
    confidence: float = 1.0

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise ValidationError("Entity value must not be empty")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValidationError(f"Entity confidence out of range: {self.confidence}")

    @property
    def key(self) -> str:
        """Case-insensitive identity used for deduplication."""
        return self.value.lower()


def dedupe_entities(entities: list[Entity]) -> list[Entity]:
    """Keep the first entity per lowercased value, preserving order."""
    seen: set[str] = set()
    result: list[Entity] = []
    for entity in entities:
        if entity.key in seen:
            continue
        seen.add(entity.key)
        result.append(entity)
    return result
