"""Name category reported by a name tagger."""

from enum import StrEnum


class NameCategory(StrEnum):
    """Categories a statistical name tagger may assign to a span."""

    PERSONAL_NAME = "personal_name"
    ORGANIZATION_NAME = "organization_name"
    PLACE_NAME = "place_name"
