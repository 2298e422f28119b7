"""Domain value objects."""

from contextflow.domain.value_objects.collector_state import CollectorState
from contextflow.domain.value_objects.content_hash import ContentHash
from contextflow.domain.value_objects.context_source import ContextSource
from contextflow.domain.value_objects.entity_type import EntityType
from contextflow.domain.value_objects.name_category import NameCategory

__all__ = [
    "CollectorState",
    "ContentHash",
    "ContextSource",
    "EntityType",
    "NameCategory",
]
