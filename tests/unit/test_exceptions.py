"""Unit tests for domain exceptions."""

import pytest

from contextflow.domain.exceptions import (
    ContextFlowError,
    EmbeddingError,
    EmbeddingNotConfigured,
    StoreError,
    StoreInitializationError,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc",
    [ValidationError, StoreError, StoreInitializationError, EmbeddingError, EmbeddingNotConfigured],
)
def test_inherits_contextflow_error(exc: type[Exception]) -> None:
    assert issubclass(exc, ContextFlowError)


def test_store_initialization_is_store_error() -> None:
    assert issubclass(StoreInitializationError, StoreError)


def test_not_configured_catchable_as_embedding_error() -> None:
    with pytest.raises(EmbeddingError, match="no key"):
        raise EmbeddingNotConfigured("no key")
