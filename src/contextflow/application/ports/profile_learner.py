"""Profile learner port - user identity and contact learning."""

from typing import Protocol

from contextflow.domain.entities import Entity


class ProfileLearner(Protocol):
    """Port for recognizing the user and learning contacts."""

    def is_me(self, value: str) -> bool: ...

    def learn_from_entities(self, entities: list[Entity]) -> None: ...
