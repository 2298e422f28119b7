"""Unit tests for NoiseFilter."""

import pytest

from contextflow.application.dto import FilterConfig
from contextflow.application.services import NoiseFilter, RejectReason


@pytest.fixture
def noise_filter() -> NoiseFilter:
    return NoiseFilter()


@pytest.mark.parametrize(
    "text",
    [
        "OPENAI_API_KEY is set in the shell",
        "config api-key rotated yesterday",
        "token sk-proj-abc123 leaked",
        "the client secret for production",
        "login with password=hunter2 please",
        "curl -H 'Bearer abc' https://example.com",
        "Authorization: Basic dXNlcg==",
    ],
)
def test_secrets_rejected(noise_filter: NoiseFilter, text: str) -> None:
    """Credential markers are rejected case-insensitively."""
    assert noise_filter.reason(text) == RejectReason.SECRET


def test_secret_check_precedes_everything(noise_filter: NoiseFilter) -> None:
    """Secret markers win over the later checks."""
    text = "select * from users where api_key = 'x'"
    assert noise_filter.reason(text) == RejectReason.SECRET


def test_sql_rejected(noise_filter: NoiseFilter) -> None:
    assert noise_filter.reason("SELECT name FROM customers") == RejectReason.SQL
    assert noise_filter.reason("insert into events values") == RejectReason.SQL


def test_sql_keywords_in_any_order(noise_filter: NoiseFilter) -> None:
    assert noise_filter.reason("rows from orders; select count") == RejectReason.SQL
    assert noise_filter.reason("I selected two items from the list") is None


def test_noise_markers_rejected(noise_filter: NoiseFilter) -> None:
    assert noise_filter.reason("AXFocused element changed") == RejectReason.NOISE_MARKER
    assert noise_filter.reason("Build Succeeded in 4.2s") == RejectReason.NOISE_MARKER


def test_custom_noise_markers() -> None:
    """Noise markers are configurable."""
    noise_filter = NoiseFilter(FilterConfig(noise_markers=("MyProduct",)))
    assert noise_filter.reason("myproduct settings window") == RejectReason.NOISE_MARKER
    assert noise_filter.reason("console.log output here") is None


def test_too_long_rejected(noise_filter: NoiseFilter) -> None:
    assert noise_filter.reason("word " * 1001) == RejectReason.TOO_LONG
    assert noise_filter.reason("a" * 5000) is None


def test_structural_ratio(noise_filter: NoiseFilter) -> None:
    """More than 15% structural characters reads as code."""
    assert noise_filter.reason("if (a) { b[0] = c(); }") == RejectReason.STRUCTURAL
    # exactly 15%: 3 of 20 characters
    assert noise_filter.reason("abcdefghijklmnopq();") is None


def test_system_metrics_rejected_only_for_captures(noise_filter: NoiseFilter) -> None:
    text = "CPU 12% GPU 30% RAM 512MB Net 3KB/s"
    assert noise_filter.reason(text, capture=True) == RejectReason.METRICS
    assert noise_filter.reason(text) is None
    # three metric tokens are tolerated
    assert noise_filter.reason("CPU 12% GPU 30% RAM 512MB", capture=True) is None


def test_clean_text_accepted(noise_filter: NoiseFilter) -> None:
    assert not noise_filter.is_rejected("Please send invoice 500 PLN to john@x.com")
    assert not noise_filter.is_rejected("Kamil Moskała 7:10 PM")
