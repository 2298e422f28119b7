"""Domain exceptions."""


class ContextFlowError(Exception):
    """Base exception for ContextFlow."""

    pass


class ValidationError(ContextFlowError):
    """Validation failed for input data."""

    pass


class StoreError(ContextFlowError):
    """Context store operation failed."""

    pass


class StoreInitializationError(StoreError):
    """Context store could not be initialized; collection cannot start."""

    pass


class EmbeddingError(ContextFlowError):
    """Embedding request failed."""

    pass


class EmbeddingNotConfigured(EmbeddingError):
    """Embedding service has no credentials configured."""

    pass
