"""Entity extractor - ordered, pattern-based recognition pipeline.

Stages run in order and each one only appends entities whose lowercased
value is not already present:

1. names followed by a message timestamp (``Kamil Moskała 7:10 PM``)
2. conversation markers (``. Name Surname``, ``Message to Name``, ``#channel``)
3. name tagger spans (person / company / location)
4. first e-mail address
5. first money amount
6. capitalized word pairs whose first word is a known given name
"""

import re

from contextflow.application.dto import EntityConfidence
from contextflow.application.ports import NameTagger
from contextflow.domain.entities import Entity
from contextflow.domain.value_objects import EntityType, NameCategory

_UPPER = "A-ZŻŹĆĄŚĘŁÓŃ"
_LOWER = "a-zżźćąśęłóń"
_WORD = f"[{_UPPER}][{_LOWER}]+"

TIMESTAMPED_NAME = re.compile(rf"({_WORD}\s+{_WORD})\s+\d{{1,2}}:\d{{2}}(?:\s*(?:AM|PM))?")
CONVERSATION_NAMES = (
    re.compile(rf"\.\s*({_WORD}\s+{_WORD})"),
    re.compile(rf"Message to\s+({_WORD}(?:\s+{_WORD})?)"),
)
CHANNEL = re.compile(r"#\s*([a-z0-9_-]+)", re.IGNORECASE)
EMAIL = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
MONEY = re.compile(
    r"\d[\d\s,.]*?\s*(?:PLN|USD|EUR|zł)(?![A-Za-z])|\d[\d\s,.]*?\s*[€$]|[€$]\s*\d[\d,.]*",
    re.IGNORECASE,
)
NAME_PAIR = re.compile(rf"\b({_WORD})\s+({_WORD})\b")

COMMON_GIVEN_NAMES = frozenset(
    {
        "Adam",
        "Kamil",
        "Filip",
        "Piotr",
        "Marcin",
        "Tomasz",
        "Michał",
        "Krzysztof",
        "Paweł",
        "Anna",
        "Maria",
        "Katarzyna",
        "Monika",
        "Agnieszka",
        "Ewa",
        "Bart",
        "Bartek",
    }
)

IGNORED_CHANNELS = frozenset({"general"})

_TAG_TYPES = {
    NameCategory.PERSONAL_NAME: EntityType.PERSON,
    NameCategory.ORGANIZATION_NAME: EntityType.COMPANY,
    NameCategory.PLACE_NAME: EntityType.LOCATION,
}


class _Collected:
    """Ordered entity list with case-insensitive membership."""

    def __init__(self) -> None:
        self.items: list[Entity] = []
        self._keys: set[str] = set()

    def add(self, entity_type: EntityType, value: str, confidence: float) -> None:
        value = value.strip()
        if not value or value.lower() in self._keys:
            return
        self._keys.add(value.lower())
        self.items.append(Entity(type=entity_type, value=value, confidence=confidence))


class EntityExtractor:
    """Extract typed, confidence-scored entities from text."""

    def __init__(
        self,
        tagger: NameTagger | None = None,
        confidence: EntityConfidence | None = None,
        given_names: frozenset[str] = COMMON_GIVEN_NAMES,
    ) -> None:
        self._tagger = tagger
        self._confidence = confidence or EntityConfidence()
        self._given_names = given_names

    def extract(self, text: str) -> list[Entity]:
        found = _Collected()
        conf = self._confidence

        for match in TIMESTAMPED_NAME.finditer(text):
            found.add(EntityType.PERSON, match.group(1), conf.timestamped_name)

        for pattern in CONVERSATION_NAMES:
            for match in pattern.finditer(text):
                found.add(EntityType.PERSON, match.group(1), conf.conversation_name)
        for match in CHANNEL.finditer(text):
            channel = match.group(1)
            if channel.lower() not in IGNORED_CHANNELS:
                found.add(EntityType.PROJECT, channel, conf.channel)

        if self._tagger is not None:
            for span in self._tagger.tag(text):
                entity_type = _TAG_TYPES.get(span.category)
                if entity_type is not None:
                    found.add(entity_type, text[span.start : span.end], conf.tagged_name)

        email = EMAIL.search(text)
        if email:
            found.add(EntityType.EMAIL, email.group(0), conf.email)

        money = MONEY.search(text)
        if money:
            found.add(EntityType.MONEY, " ".join(money.group(0).split()), conf.money)

        for match in NAME_PAIR.finditer(text):
            given, family = match.group(1), match.group(2)
            if given in self._given_names or given[:4] in self._given_names:
                found.add(EntityType.PERSON, f"{given} {family}", conf.given_name_pair)

        return found.items
