"""Entity type for extracted entities."""

from enum import StrEnum


class EntityType(StrEnum):
    """Supported entity types."""

    PERSON = "person"
    COMPANY = "company"
    PROJECT = "project"
    DATE = "date"
    MONEY = "money"
    EMAIL = "email"
    PHONE = "phone"
    LOCATION = "location"
    OTHER = "other"
