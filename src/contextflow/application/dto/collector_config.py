"""Collector configuration DTOs."""

from dataclasses import dataclass, field

from contextflow.domain.entities import MAX_CONTENT_LENGTH

DEFAULT_NOISE_MARKERS: tuple[str, ...] = (
    "axfocused",
    "axvalue",
    "<!doctype",
    "<html",
    "<script",
    "function()",
    "console.log",
    "contextflow",
    "localhost:",
    "sqlite3",
    "xcodebuild",
    "build succeeded",
    "build failed",
    "accept file",
    "-scheme",
    ".env",
    "touch id",
)


@dataclass(frozen=True)
class FilterConfig:
    """Noise and security filter thresholds."""

    noise_markers: tuple[str, ...] = DEFAULT_NOISE_MARKERS
    max_length: int = MAX_CONTENT_LENGTH
    max_structural_ratio: float = 0.15
    max_metric_tokens: int = 3


@dataclass(frozen=True)
class DedupConfig:
    """Deduplication cache sizes and similarity threshold."""

    exact_capacity: int = 1000
    recent_capacity: int = 100
    similarity_window: int = 20
    similarity_threshold: float = 0.8


@dataclass(frozen=True)
class EntityConfidence:
    """Fixed confidence per extraction stage."""

    timestamped_name: float = 0.9
    conversation_name: float = 0.95
    channel: float = 0.8
    tagged_name: float = 1.0
    email: float = 1.0
    money: float = 1.0
    given_name_pair: float = 0.85


@dataclass(frozen=True)
class CollectorConfig:
    """Batching and per-producer minimum lengths."""

    batch_size: int = 10
    batch_delay: float = 2.0
    min_length: int = 15
    min_clipboard_length: int = 10
    min_notification_length: int = 10
    min_capture_length: int = 50
    filter: FilterConfig = field(default_factory=FilterConfig)
    dedup: DedupConfig = field(default_factory=DedupConfig)
    confidence: EntityConfidence = field(default_factory=EntityConfidence)
