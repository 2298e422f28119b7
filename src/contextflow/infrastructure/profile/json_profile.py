"""JSON-file user profile - self recognition and contact learning."""

import logging
from pathlib import Path
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, ValidationError

from contextflow.domain.entities import Entity
from contextflow.domain.value_objects import EntityType

logger = logging.getLogger(__name__)


class Contact(BaseModel):
    """Known contact learned from observed text."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    email: str | None = None
    company: str | None = None
    relationship: str | None = None


class UserProfile(BaseModel):
    """The user's own identity and learned contacts."""

    name: str = ""
    system_full_name: str | None = None
    email: str | None = None
    known_contacts: list[Contact] = Field(default_factory=list)

    def is_me(self, value: str) -> bool:
        """Check whether a name refers to the user."""
        candidate = value.strip().lower()
        if not candidate:
            return False
        my_name = self.name.strip().lower()
        if my_name and candidate == my_name:
            return True
        if self.system_full_name:
            full = self.system_full_name.strip().lower()
            parts = full.split()
            if candidate == full or (parts and candidate in (parts[0], parts[-1])):
                return True
        if my_name:
            if candidate == my_name.split()[0]:
                return True
            # Nicknames: "Fil" for "Filip"
            if len(my_name) >= 3 and candidate.startswith(my_name[:3]):
                return True
        return False

    def knows(self, name: str) -> bool:
        lower = name.lower()
        return any(c.name.lower() == lower for c in self.known_contacts)


class JsonProfileLearner:
    """Profile learner persisting the profile as JSON."""

    def __init__(self, path: Path, default: UserProfile | None = None) -> None:
        self._path = path
        self.profile = self._load(default or UserProfile())

    def _load(self, default: UserProfile) -> UserProfile:
        try:
            profile = UserProfile.model_validate_json(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.info("No saved profile at %s, using default", self._path)
            return default
        except ValidationError as e:
            logger.warning("Invalid profile at %s, using default: %s", self._path, e)
            return default
        logger.info("Loaded user profile: %s", profile.name)
        return profile

    def save(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(self.profile.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to save user profile: %s", e)

    def is_me(self, value: str) -> bool:
        return self.profile.is_me(value)

    def add_contact(self, contact: Contact) -> bool:
        """Add a contact unless it is the user or already known."""
        if self.profile.is_me(contact.name) or self.profile.knows(contact.name):
            return False
        self.profile.known_contacts.append(contact)
        logger.info("Added contact: %s", contact.name)
        return True

    def learn_from_entities(self, entities: list[Entity]) -> None:
        added = False
        for entity in entities:
            if entity.type != EntityType.PERSON:
                continue
            added |= self.add_contact(Contact(name=entity.value, relationship="contact"))
        if added:
            self.save()
