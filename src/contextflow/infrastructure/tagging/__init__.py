"""Name tagger adapters."""

import logging

from contextflow.application.ports import NameTagger
from contextflow.infrastructure.tagging.regex_tagger import RegexNameTagger
from contextflow.infrastructure.tagging.spacy_tagger import SpacyNameTagger

logger = logging.getLogger(__name__)


def create_name_tagger(model: str) -> NameTagger:
    """spaCy tagger for ``model``, or the regex tagger when it is empty or not installed."""
    if model:
        try:
            return SpacyNameTagger.load(model)
        except OSError as e:
            logger.warning(
                "spaCy model %s unavailable, using regex tagger "
                "(install with: python -m spacy download %s): %s",
                model,
                model,
                e,
            )
    return RegexNameTagger()


__all__ = ["RegexNameTagger", "SpacyNameTagger", "create_name_tagger"]
