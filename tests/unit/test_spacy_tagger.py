"""Unit tests for SpacyNameTagger over a blank pipeline with an entity ruler."""

import pytest
import spacy

from contextflow.application.services import EntityExtractor
from contextflow.domain.value_objects import EntityType, NameCategory
from contextflow.infrastructure.tagging import (
    RegexNameTagger,
    SpacyNameTagger,
    create_name_tagger,
)


@pytest.fixture
def tagger() -> SpacyNameTagger:
    """Rule-based NER so no trained pipeline has to be installed."""
    nlp = spacy.blank("en")
    ruler = nlp.add_pipe("entity_ruler")
    ruler.add_patterns(
        [
            {"label": "PERSON", "pattern": "Anna Nowak"},
            {"label": "ORG", "pattern": "Acme"},
            {"label": "GPE", "pattern": "Warsaw"},
            {"label": "DATE", "pattern": "Friday"},
            {"label": "persName", "pattern": "Kamil"},
            {"label": "geogName", "pattern": "Tatry"},
        ]
    )
    return SpacyNameTagger(nlp)


def _tagged(tagger: SpacyNameTagger, text: str) -> list[tuple[str, NameCategory]]:
    return [(text[s.start : s.end], s.category) for s in tagger.tag(text)]


def test_maps_entity_labels(tagger: SpacyNameTagger) -> None:
    text = "Call with Anna Nowak from Acme in Warsaw on Friday"
    assert _tagged(tagger, text) == [
        ("Anna Nowak", NameCategory.PERSONAL_NAME),
        ("Acme", NameCategory.ORGANIZATION_NAME),
        ("Warsaw", NameCategory.PLACE_NAME),
    ]


def test_maps_polish_labels(tagger: SpacyNameTagger) -> None:
    assert _tagged(tagger, "Kamil jedzie w Tatry") == [
        ("Kamil", NameCategory.PERSONAL_NAME),
        ("Tatry", NameCategory.PLACE_NAME),
    ]


def test_extractor_uses_tagged_people(tagger: SpacyNameTagger) -> None:
    entities = EntityExtractor(tagger=tagger).extract("Call with Anna Nowak from Acme in Warsaw")

    assert [(e.type, e.value, e.confidence) for e in entities] == [
        (EntityType.PERSON, "Anna Nowak", 1.0),
        (EntityType.COMPANY, "Acme", 1.0),
        (EntityType.LOCATION, "Warsaw", 1.0),
    ]


def test_missing_model_falls_back_to_regex() -> None:
    assert isinstance(create_name_tagger("no_such_spacy_model_xyz"), RegexNameTagger)


def test_empty_model_uses_regex() -> None:
    assert isinstance(create_name_tagger(""), RegexNameTagger)
