"""Text normalization helpers shared by every matching stage."""

from __future__ import annotations

import unicodedata
from collections.abc import Collection


def normalize_text(text: str) -> str:
    """Lowercase, strip diacritics and trim surrounding whitespace."""
    lowered = text.lower()
    decomposed = unicodedata.normalize("NFD", lowered)
    no_accents = "".join(char for char in decomposed if unicodedata.category(char) != "Mn")
    return no_accents.strip()


def remove_stop_words(text: str, stop_words: Collection[str]) -> str:
    """Drop stop-word tokens and rejoin the rest with single spaces."""
    if not stop_words:
        return " ".join(text.split())
    return " ".join(word for word in text.split() if word not in stop_words)
