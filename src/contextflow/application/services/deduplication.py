"""Deduplication engine - exact-hash cache plus near-duplicate cache."""

from collections import OrderedDict, deque

from contextflow.application.dto import DedupConfig
from contextflow.domain.value_objects import ContentHash


def word_set(text: str) -> frozenset[str]:
    """Lowercased whitespace-separated words longer than two characters."""
    return frozenset(w for w in text.lower().split() if len(w) > 2)


def jaccard(a: frozenset[str], b: frozenset[str]) -> float:
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


class ExactCache:
    """Bounded FIFO set of content hashes."""

    def __init__(self, capacity: int = 1000) -> None:
        self._capacity = capacity
        self._hashes: OrderedDict[ContentHash, None] = OrderedDict()

    def __contains__(self, content: str) -> bool:
        return ContentHash.of(content) in self._hashes

    def __len__(self) -> int:
        return len(self._hashes)

    def add(self, content: str) -> None:
        self._hashes[ContentHash.of(content)] = None
        while len(self._hashes) > self._capacity:
            self._hashes.popitem(last=False)


class NearDuplicateCache:
    """Bounded list of recently accepted contents compared by Jaccard similarity.

    Only the `window` most recent entries are scanned, even though up to
    `capacity` are retained.
    """

    def __init__(
        self, capacity: int = 100, window: int = 20, threshold: float = 0.8
    ) -> None:
        self._window = window
        self._threshold = threshold
        self._recent: deque[frozenset[str]] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._recent)

    def is_similar(self, content: str) -> bool:
        words = word_set(content)
        if not words:
            return False
        start = max(0, len(self._recent) - self._window)
        for i in range(len(self._recent) - 1, start - 1, -1):
            if jaccard(words, self._recent[i]) >= self._threshold:
                return True
        return False

    def add(self, content: str) -> None:
        self._recent.append(word_set(content))


class Deduplicator:
    """Composes the exact and near-duplicate checks.

    Caches are mutated only through `remember`, so rejected content never
    enters either cache.
    """

    def __init__(self, config: DedupConfig | None = None) -> None:
        config = config or DedupConfig()
        self.exact = ExactCache(config.exact_capacity)
        self.near = NearDuplicateCache(
            config.recent_capacity, config.similarity_window, config.similarity_threshold
        )

    def is_duplicate(self, content: str, *, fuzzy: bool = True) -> bool:
        if content in self.exact:
            return True
        return fuzzy and self.near.is_similar(content)

    def remember(self, content: str, *, fuzzy: bool = True) -> None:
        self.exact.add(content)
        if fuzzy:
            self.near.add(content)
