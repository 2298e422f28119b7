"""Name tagger port - personal/organization/place classification."""

from typing import NamedTuple, Protocol

from contextflow.domain.value_objects import NameCategory


class TaggedSpan(NamedTuple):
    """Character span [start, end) of text tagged with a name category."""

    start: int
    end: int
    category: NameCategory


class NameTagger(Protocol):
    """Port for statistical or rule-based name tagging."""

    def tag(self, text: str) -> list[TaggedSpan]: ...
