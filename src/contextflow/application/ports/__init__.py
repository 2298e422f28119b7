"""Application ports - interfaces for external adapters."""

from contextflow.application.ports.context_store import ContextStore
from contextflow.application.ports.embedding_service import EmbeddingService
from contextflow.application.ports.name_tagger import NameTagger, TaggedSpan
from contextflow.application.ports.profile_learner import ProfileLearner

__all__ = [
    "ContextStore",
    "EmbeddingService",
    "NameTagger",
    "ProfileLearner",
    "TaggedSpan",
]
