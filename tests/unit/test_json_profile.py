"""Unit tests for the JSON user profile."""

from pathlib import Path

import pytest

from contextflow.domain.entities import Entity
from contextflow.domain.value_objects import EntityType
from contextflow.infrastructure.profile.json_profile import Contact, JsonProfileLearner, UserProfile


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(name="Filip Wnęk", system_full_name="Filip Wnęk")


@pytest.mark.parametrize(
    "value",
    ["Filip Wnęk", "filip wnęk", "  Filip Wnęk ", "Filip", "Wnęk", "Fil"],
)
def test_is_me_matches(profile: UserProfile, value: str) -> None:
    assert profile.is_me(value)


@pytest.mark.parametrize("value", ["Kamil Moskała", "", "   ", "Fi", "Anna"])
def test_is_me_rejects(profile: UserProfile, value: str) -> None:
    assert not profile.is_me(value)


def test_is_me_with_empty_profile() -> None:
    assert not UserProfile().is_me("Filip")


def test_missing_file_uses_default(tmp_path: Path, profile: UserProfile) -> None:
    learner = JsonProfileLearner(tmp_path / "profile.json", default=profile)
    assert learner.profile is profile


def test_invalid_file_uses_default(tmp_path: Path, profile: UserProfile) -> None:
    path = tmp_path / "profile.json"
    path.write_text("{not json", encoding="utf-8")

    learner = JsonProfileLearner(path, default=profile)

    assert learner.profile.name == "Filip Wnęk"


def test_learn_from_entities_saves_new_people(tmp_path: Path, profile: UserProfile) -> None:
    path = tmp_path / "nested" / "profile.json"
    learner = JsonProfileLearner(path, default=profile)

    learner.learn_from_entities(
        [
            Entity(EntityType.PERSON, "Kamil Moskała"),
            Entity(EntityType.PERSON, "Filip Wnęk"),
            Entity(EntityType.EMAIL, "kamil@example.com"),
        ]
    )

    assert [c.name for c in learner.profile.known_contacts] == ["Kamil Moskała"]
    reloaded = JsonProfileLearner(path)
    assert reloaded.profile.name == "Filip Wnęk"
    assert [c.name for c in reloaded.profile.known_contacts] == ["Kamil Moskała"]
    assert reloaded.profile.known_contacts[0].relationship == "contact"


def test_learn_without_new_people_does_not_save(tmp_path: Path, profile: UserProfile) -> None:
    path = tmp_path / "profile.json"
    learner = JsonProfileLearner(path, default=profile)

    learner.learn_from_entities([Entity(EntityType.PERSON, "Filip")])

    assert not path.exists()


def test_add_contact_skips_known(tmp_path: Path, profile: UserProfile) -> None:
    learner = JsonProfileLearner(tmp_path / "profile.json", default=profile)

    assert learner.add_contact(Contact(name="Anna Nowak"))
    assert not learner.add_contact(Contact(name="anna nowak"))
    assert len(learner.profile.known_contacts) == 1
