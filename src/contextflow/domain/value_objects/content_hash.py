"""Content hash for exact deduplication."""

import hashlib
from dataclasses import dataclass


@dataclass(frozen=True)
class ContentHash:
    """SHA-256 digest of chunk content (binary)."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != 32:
            raise ValueError("SHA-256 hash must be 32 bytes")

    @classmethod
    def of(cls, content: str) -> "ContentHash":
        return cls(hashlib.sha256(content.encode("utf-8")).digest())
