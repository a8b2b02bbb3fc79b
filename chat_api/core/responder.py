"""Kernlogik des Chat-Responders: prüft die Nachricht, wendet die festen
Phrasen-Regeln an und baut die Antwort mit Zeitstempel.

Das Modul ist zustandslos; ``respond`` kann beliebig parallel aufgerufen werden.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from chat_api.core.models import ChatResponse

VALIDATION_ERROR_MESSAGE = "Message parameter is required and must be a non-empty string."

# Reihenfolge ist relevant: der erste Treffer gewinnt.
PHRASE_RULES = (
    ("hello", "Hi there!"),
    ("how are you?", "I'm just a bot, but I'm doing great!"),
)

ECHO_PREFIX = "You said: "

# Whitespace wie bei JavaScript-`trim()` (Zs, Zeilenumbrüche, BOM); nicht `str.strip()`.
TRIM_CHARACTERS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class InvalidMessageError(ValueError):
    """Die Nachricht fehlt, ist kein String oder ist nach dem Trimmen leer."""

    def __init__(self, message: str = VALIDATION_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def is_valid_message(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, str):
        return False
    return len(value.strip(TRIM_CHARACTERS)) > 0


def make_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 in UTC mit Mikrosekunden und ``Z``-Suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")


def match_reply(message: str) -> str:
    """Ermittelt die Antwort für eine bereits geprüfte Nachricht.

    Normalisiert wird nur für den Vergleich; im Default-Fall wird die
    Originalnachricht unverändert zurückgegeben.
    """
    normalized = message.strip(TRIM_CHARACTERS).lower()
    for phrase, reply in PHRASE_RULES:
        if normalized == phrase:
            return reply
    return f"{ECHO_PREFIX}{message}"


def respond(message: Any) -> ChatResponse:
    """Beantwortet eine Nachricht oder wirft ``InvalidMessageError``."""
    if not is_valid_message(message):
        raise InvalidMessageError()

    bot_response = match_reply(message)
    return ChatResponse(bot_response=bot_response, timestamp=make_timestamp())
