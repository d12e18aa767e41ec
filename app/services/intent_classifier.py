"""Phrase-list intent detection for conversational openers and closers."""

from __future__ import annotations

from app.core.chat_config import DEFAULT_CHAT_CONFIG, ChatConfig
from app.services.text_normalizer import normalize_text

GREETING = "greeting"
FAREWELL = "farewell"
QUERY = "query"


class IntentClassifier:
    """Detects greetings and farewells before any keyword matching runs."""

    def __init__(self, config: ChatConfig = DEFAULT_CHAT_CONFIG) -> None:
        self._phrases: dict[str, tuple[str, ...]] = {
            GREETING: _normalize_phrases(config.greeting_phrases),
            FAREWELL: _normalize_phrases(config.farewell_phrases),
        }
        # Greeting wins when a message matches both lists.
        self._priority_order = (GREETING, FAREWELL)

    def classify(self, text: str) -> str:
        """Return ``greeting``, ``farewell`` or ``query`` for a normalized message."""
        for intent in self._priority_order:
            if self._matches(text, self._phrases[intent]):
                return intent
        return QUERY

    def is_greeting(self, text: str) -> bool:
        return self._matches(text, self._phrases[GREETING])

    def is_farewell(self, text: str) -> bool:
        return self._matches(text, self._phrases[FAREWELL])

    def _matches(self, text: str, phrases: tuple[str, ...]) -> bool:
        if not text:
            return False
        return any(text == phrase or phrase in text for phrase in phrases)


def _normalize_phrases(phrases: tuple[str, ...]) -> tuple[str, ...]:
    normalized = (normalize_text(phrase) for phrase in phrases)
    return tuple(phrase for phrase in normalized if phrase)
