"""Noise and security filter - rejects secrets, code and telemetry text."""

from enum import StrEnum

from contextflow.application.dto import FilterConfig

# Never bypassed: anything that looks like a credential is dropped.
SECRET_MARKERS: tuple[str, ...] = (
    "api_key",
    "api-key",
    "apikey",
    "sk-ant-",
    "sk-proj-",
    "ghp_",
    "xoxb-",
    "xoxp-",
    "secret",
    "password=",
    "bearer ",
    "authorization:",
)

STRUCTURAL_CHARS = frozenset("{}[]();=><")
METRIC_SUFFIXES = ("KB/s", "MB/s", "MB", "%")


class RejectReason(StrEnum):
    """Why text was rejected."""

    SECRET = "secret"
    SQL = "sql"
    NOISE_MARKER = "noise_marker"
    TOO_LONG = "too_long"
    STRUCTURAL = "structural"
    METRICS = "metrics"


class NoiseFilter:
    """Ordered, first-match-wins predicate over raw text."""

    def __init__(self, config: FilterConfig | None = None) -> None:
        self._config = config or FilterConfig()
        self._noise_markers = tuple(m.lower() for m in self._config.noise_markers if m)

    def is_rejected(self, text: str, *, capture: bool = False) -> bool:
        return self.reason(text, capture=capture) is not None

    def reason(self, text: str, *, capture: bool = False) -> RejectReason | None:
        """Return the first matching reject reason, or None when text is clean.

        ``capture`` enables the system-metrics check used for screen OCR scans.
        """
        lower = text.lower()
        if any(marker in lower for marker in SECRET_MARKERS):
            return RejectReason.SECRET
        if "insert into" in lower or ("select " in lower and " from " in lower):
            return RejectReason.SQL
        if any(marker in lower for marker in self._noise_markers):
            return RejectReason.NOISE_MARKER
        if len(text) > self._config.max_length:
            return RejectReason.TOO_LONG
        if text:
            structural = sum(1 for ch in text if ch in STRUCTURAL_CHARS)
            if structural / len(text) > self._config.max_structural_ratio:
                return RejectReason.STRUCTURAL
        if not capture:
            return None
        metric_tokens = [t for t in text.split() if t.endswith(METRIC_SUFFIXES)]
        if len(metric_tokens) > self._config.max_metric_tokens:
            return RejectReason.METRICS
        return None
