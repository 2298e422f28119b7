"""spaCy-backed name tagger - statistical NER over person, organization and place labels."""

import logging

import spacy
from spacy.language import Language

from contextflow.application.ports import TaggedSpan
from contextflow.domain.value_objects import NameCategory

logger = logging.getLogger(__name__)

# OntoNotes / WikiNER labels (English pipelines) and NKJP labels (Polish pipelines)
LABEL_CATEGORIES: dict[str, NameCategory] = {
    "PERSON": NameCategory.PERSONAL_NAME,
    "PER": NameCategory.PERSONAL_NAME,
    "persName": NameCategory.PERSONAL_NAME,
    "ORG": NameCategory.ORGANIZATION_NAME,
    "orgName": NameCategory.ORGANIZATION_NAME,
    "GPE": NameCategory.PLACE_NAME,
    "LOC": NameCategory.PLACE_NAME,
    "placeName": NameCategory.PLACE_NAME,
    "geogName": NameCategory.PLACE_NAME,
}


class SpacyNameTagger:
    """Tags names with a spaCy pipeline's entity recognizer."""

    def __init__(self, nlp: Language) -> None:
        self._nlp = nlp

    @classmethod
    def load(cls, model: str) -> "SpacyNameTagger":
        """Load an installed pipeline package. Raises OSError if it is missing."""
        nlp = spacy.load(model)
        logger.info("Loaded spaCy model: %s", model)
        return cls(nlp)

    def tag(self, text: str) -> list[TaggedSpan]:
        doc = self._nlp(text)
        return [
            TaggedSpan(ent.start_char, ent.end_char, LABEL_CATEGORIES[ent.label_])
            for ent in doc.ents
            if ent.label_ in LABEL_CATEGORIES
        ]
