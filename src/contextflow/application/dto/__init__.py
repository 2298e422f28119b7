"""Application DTOs."""

from contextflow.application.dto.collector_config import (
    DEFAULT_NOISE_MARKERS,
    CollectorConfig,
    DedupConfig,
    EntityConfidence,
    FilterConfig,
)
from contextflow.application.dto.collector_status import CollectorStatus

__all__ = [
    "DEFAULT_NOISE_MARKERS",
    "CollectorConfig",
    "CollectorStatus",
    "DedupConfig",
    "EntityConfidence",
    "FilterConfig",
]
