"""Application services - pure ingestion stages."""

from contextflow.application.services.deduplication import (
    Deduplicator,
    ExactCache,
    NearDuplicateCache,
    jaccard,
    word_set,
)
from contextflow.application.services.entity_extractor import EntityExtractor
from contextflow.application.services.noise_filter import NoiseFilter, RejectReason
from contextflow.application.services.topic_classifier import TopicClassifier

__all__ = [
    "Deduplicator",
    "EntityExtractor",
    "ExactCache",
    "NearDuplicateCache",
    "NoiseFilter",
    "RejectReason",
    "TopicClassifier",
    "jaccard",
    "word_set",
]
