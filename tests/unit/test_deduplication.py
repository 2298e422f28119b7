"""Unit tests for deduplication caches."""

from contextflow.application.dto import DedupConfig
from contextflow.application.services import (
    Deduplicator,
    ExactCache,
    NearDuplicateCache,
    jaccard,
    word_set,
)


def _words(prefix: str, count: int, start: int = 0) -> str:
    return " ".join(f"{prefix}{i:03d}" for i in range(start, start + count))


def test_word_set_filters_short_words() -> None:
    assert word_set("An ox ate THE hay") == frozenset({"ate", "the", "hay"})


def test_jaccard_empty_sets() -> None:
    assert jaccard(frozenset(), frozenset({"abc"})) == 0.0


def test_exact_cache_fifo_eviction() -> None:
    """Oldest hash is evicted once capacity is exceeded."""
    cache = ExactCache(capacity=3)
    for text in ("one", "two", "three", "four"):
        cache.add(text)

    assert len(cache) == 3
    assert "one" not in cache
    assert "four" in cache


def test_similarity_at_threshold_rejected() -> None:
    """Overlap of exactly 0.8 counts as a near-duplicate."""
    cache = NearDuplicateCache()
    cache.add("alpha bravo charlie delta echo")

    assert jaccard(word_set("alpha bravo charlie delta"), word_set("alpha bravo charlie delta echo")) == 0.8
    assert cache.is_similar("alpha bravo charlie delta")


def test_similarity_below_threshold_accepted() -> None:
    """Overlap of 0.79 is accepted."""
    cache = NearDuplicateCache()
    cache.add(_words("w", 90))
    candidate = _words("w", 79) + " " + _words("x", 10)

    assert jaccard(word_set(candidate), word_set(_words("w", 90))) == 0.79
    assert not cache.is_similar(candidate)


def test_similarity_window_limits_scan() -> None:
    """Only the 20 most recent of up to 100 contents are compared."""
    cache = NearDuplicateCache(capacity=100, window=20)
    cache.add("alpha bravo charlie delta echo")
    for i in range(20):
        cache.add(_words(f"n{i}x", 5))

    assert len(cache) == 21
    assert not cache.is_similar("alpha bravo charlie delta echo")


def test_near_cache_capacity() -> None:
    cache = NearDuplicateCache(capacity=100)
    for i in range(150):
        cache.add(_words(f"n{i}x", 3))
    assert len(cache) == 100


def test_deduplicator_mutates_only_on_remember() -> None:
    """Checking content never inserts it."""
    dedup = Deduplicator(DedupConfig())
    text = "weekly planning notes for the team"

    assert not dedup.is_duplicate(text)
    assert not dedup.is_duplicate(text)
    dedup.remember(text)
    assert dedup.is_duplicate(text)


def test_deduplicator_exact_only() -> None:
    """Exact-only mode ignores the near-duplicate cache."""
    dedup = Deduplicator()
    dedup.remember("alpha bravo charlie delta echo", fuzzy=False)

    assert len(dedup.near) == 0
    assert not dedup.is_duplicate("alpha bravo charlie delta echo foxtrot")
    assert dedup.is_duplicate("alpha bravo charlie delta echo", fuzzy=False)
