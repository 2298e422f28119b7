"""Collector lifecycle state."""

from enum import StrEnum


class CollectorState(StrEnum):
    """Collector states."""

    IDLE = "idle"
    COLLECTING = "collecting"
