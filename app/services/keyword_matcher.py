"""Weighted lexical matching of free text against keyword phrases."""

from __future__ import annotations

from collections.abc import Sequence

from app.core.chat_config import DEFAULT_CHAT_CONFIG, ChatConfig
from app.services import text_normalizer
from app.services.text_normalizer import normalize_text


class KeywordMatcher:
    """Scores text against keyword sets using exact, partial and related-term matches.

    Each keyword contributes at most once, through the highest tier it reaches:

    * exact: the whole phrase appears as a substring of the text;
    * partial: for multi-word phrases, the share of its words found in the text
      reaches ``match_threshold``;
    * related: some non-stop-word of the text is contained in the phrase, or
      the other way around.
    """

    def __init__(self, config: ChatConfig = DEFAULT_CHAT_CONFIG) -> None:
        self.config = config

    def calculate_relevance(self, text: str, keywords: Sequence[str] | None) -> float:
        """Return the weighted relevance of text for a keyword set, stop words removed."""
        if not text or not keywords:
            return 0.0
        cleaned_text = text_normalizer.remove_stop_words(normalize_text(text), self.config.stop_words)
        return self._score(cleaned_text, keywords, self.config.match_threshold, partial_matches=True)

    def has_keywords(
        self,
        text: str,
        keywords: Sequence[str] | None,
        *,
        min_matches: float = 1,
        match_threshold: float | None = None,
        partial_matches: bool = True,
        remove_stop_words: bool = False,
    ) -> bool:
        """Return True when the accumulated match weight reaches ``min_matches``."""
        if not text or not keywords:
            return False
        cleaned_text = normalize_text(text)
        if remove_stop_words:
            cleaned_text = text_normalizer.remove_stop_words(cleaned_text, self.config.stop_words)
        threshold = self.config.match_threshold if match_threshold is None else match_threshold
        return self._score(cleaned_text, keywords, threshold, partial_matches=partial_matches) >= min_matches

    def keyword_score(
        self,
        text: str,
        keyword: str,
        *,
        match_threshold: float | None = None,
        partial_matches: bool = True,
    ) -> float:
        """Return the contribution of a single keyword against already cleaned text."""
        threshold = self.config.match_threshold if match_threshold is None else match_threshold
        return self._keyword_score(text, self._related_words(text), normalize_text(keyword), threshold, partial_matches)

    def _score(self, text: str, keywords: Sequence[str], threshold: float, *, partial_matches: bool) -> float:
        words = self._related_words(text)
        total = 0.0
        for keyword in keywords:
            total += self._keyword_score(text, words, normalize_text(keyword), threshold, partial_matches)
        return total

    def _keyword_score(
        self,
        text: str,
        words: Sequence[str],
        keyword: str,
        threshold: float,
        partial_matches: bool,
    ) -> float:
        if not keyword or not text:
            return 0.0

        weights = self.config.weights
        if keyword in text:
            return weights.exact

        if partial_matches and " " in keyword:
            parts = keyword.split()
            matched_parts = sum(1 for part in parts if part in text)
            if matched_parts / len(parts) >= threshold:
                return weights.partial

        for word in words:
            if word in keyword or keyword in word:
                return weights.related
        return 0.0

    def _related_words(self, text: str) -> list[str]:
        # Stop words never take part in related-term comparisons.
        return [word for word in text.split() if word not in self.config.stop_words]
