"""Context ingestion use cases."""

from contextflow.application.use_cases.ingestion.context_collector import ContextCollector

__all__ = ["ContextCollector"]
