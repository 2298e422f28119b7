"""Regex-only name tagger: organization suffixes and a place gazetteer."""

import re

from contextflow.application.ports import TaggedSpan
from contextflow.domain.value_objects import NameCategory

_CAP = r"[A-ZŻŹĆĄŚĘŁÓŃ][\wżźćąśęłóń&.-]*"

ORGANIZATION = re.compile(
    rf"\b{_CAP}(?:\s+{_CAP}){{0,3}}\s+"
    r"(?:Inc\.?|Ltd\.?|LLC|GmbH|S\.A\.|Sp\. z o\.o\.|Corp\.?|AG|SE)(?!\w)"
)

DEFAULT_PLACES = frozenset(
    {
        "Warszawa",
        "Warsaw",
        "Kraków",
        "Krakow",
        "Wrocław",
        "Gdańsk",
        "Poznań",
        "Łódź",
        "Berlin",
        "London",
        "Paris",
        "New York",
        "San Francisco",
    }
)


class RegexNameTagger:
    """Tags organizations by legal-form suffix and places by gazetteer lookup."""

    def __init__(self, places: frozenset[str] = DEFAULT_PLACES) -> None:
        alternatives = "|".join(re.escape(p) for p in sorted(places, key=len, reverse=True))
        self._places = re.compile(rf"\b(?:{alternatives})\b") if places else None

    def tag(self, text: str) -> list[TaggedSpan]:
        spans = [
            TaggedSpan(m.start(), m.end(), NameCategory.ORGANIZATION_NAME)
            for m in ORGANIZATION.finditer(text)
        ]
        if self._places is not None:
            spans.extend(
                TaggedSpan(m.start(), m.end(), NameCategory.PLACE_NAME)
                for m in self._places.finditer(text)
            )
        return sorted(spans)
