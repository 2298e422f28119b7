"""Topic classifier - fixed-priority keyword buckets."""

TOPIC_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("finance", ("faktura", "invoice", "płatność", "payment", "przelew", "transfer")),
    ("meeting", ("spotkanie", "meeting", "call", "zoom", "videoconference")),
    ("project", ("projekt", "project", "deadline", "termin")),
    ("email", ("mail", "email")),
)

MAIL_CLIENTS = frozenset({"mail", "outlook", "spark", "thunderbird", "airmail"})


class TopicClassifier:
    """First matching bucket wins; no match yields None."""

    def __init__(
        self,
        buckets: tuple[tuple[str, tuple[str, ...]], ...] = TOPIC_KEYWORDS,
        mail_clients: frozenset[str] = MAIL_CLIENTS,
    ) -> None:
        self._buckets = buckets
        self._mail_clients = mail_clients

    def classify(self, text: str, app_name: str = "") -> str | None:
        lower = text.lower()
        for topic, keywords in self._buckets:
            if any(keyword in lower for keyword in keywords):
                return topic
        if app_name.strip().lower() in self._mail_clients:
            return "email"
        return None
