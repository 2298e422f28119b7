"""Context source - where a chunk of context was observed."""

from enum import StrEnum


class ContextSource(StrEnum):
    """Closed set of context sources."""

    SLACK = "slack"
    MAIL = "mail"
    CALENDAR = "calendar"
    NOTES = "notes"
    CLIPBOARD = "clipboard"
    BROWSER = "browser"
    TERMINAL = "terminal"
    DOCUMENT = "document"
    ACCESSIBILITY = "accessibility"
    NOTIFICATION = "notification"
    DISCORD = "discord"
    OCR = "ocr"
    UNKNOWN = "unknown"

    @classmethod
    def from_app_name(cls, app_name: str) -> "ContextSource":
        """Map application name to source, defaulting to accessibility."""
        return _APP_SOURCES.get(app_name.strip().lower(), cls.ACCESSIBILITY)


_APP_SOURCES: dict[str, ContextSource] = {
    "slack": ContextSource.SLACK,
    "mail": ContextSource.MAIL,
    "calendar": ContextSource.CALENDAR,
    "notes": ContextSource.NOTES,
    "safari": ContextSource.BROWSER,
    "chrome": ContextSource.BROWSER,
    "firefox": ContextSource.BROWSER,
    "arc": ContextSource.BROWSER,
    "terminal": ContextSource.TERMINAL,
    "iterm": ContextSource.TERMINAL,
    "warp": ContextSource.TERMINAL,
    "pages": ContextSource.DOCUMENT,
    "word": ContextSource.DOCUMENT,
    "google docs": ContextSource.DOCUMENT,
    "discord": ContextSource.DISCORD,
}
