"""Collector status DTO."""

from dataclasses import dataclass

from contextflow.domain.value_objects import CollectorState


@dataclass
class CollectorStatus:
    """Informational snapshot for status surfaces."""

    state: CollectorState
    chunks_collected: int
    pending: int
    last_error: str | None

    @property
    def is_collecting(self) -> bool:
        return self.state == CollectorState.COLLECTING
