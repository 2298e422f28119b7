"""Unit tests for TopicClassifier."""

import pytest

from contextflow.application.services import TopicClassifier


@pytest.fixture
def classifier() -> TopicClassifier:
    return TopicClassifier()


@pytest.mark.parametrize(
    ("text", "topic"),
    [
        ("Please send invoice 500 PLN", "finance"),
        ("Przelew wysłany wczoraj", "finance"),
        ("Zoom link for tomorrow", "meeting"),
        ("Deadline moved to Friday", "project"),
        ("Check your email inbox", "email"),
        ("Lunch at noon?", None),
    ],
)
def test_keyword_buckets(classifier: TopicClassifier, text: str, topic: str | None) -> None:
    assert classifier.classify(text, "Notes") == topic


def test_priority_order(classifier: TopicClassifier) -> None:
    """Finance beats meeting, meeting beats project."""
    assert classifier.classify("meeting about the invoice", "") == "finance"
    assert classifier.classify("project sync call", "") == "meeting"


def test_mail_client_app(classifier: TopicClassifier) -> None:
    """Text from a mail client is email even without keywords."""
    assert classifier.classify("Lunch at noon?", "Mail") == "email"
    assert classifier.classify("Lunch at noon?", "Outlook") == "email"
