"""Relevance ranking and gate filtering of chat candidates."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from app.services.keyword_matcher import KeywordMatcher

SubjectT = TypeVar("SubjectT")


@dataclass(frozen=True, slots=True)
class CandidateResponse(Generic[SubjectT]):
    """A subject (canned reply, category or service) with its keyword triggers."""

    subject: SubjectT
    keywords: tuple[str, ...] = field(default_factory=tuple)
    priority: float = 1.0


@dataclass(frozen=True, slots=True)
class ScoredCandidate(Generic[SubjectT]):
    candidate: CandidateResponse[SubjectT]
    score: float


class ResponseRanker:
    """Orders candidates by priority-weighted relevance and applies result limits."""

    def __init__(self, matcher: KeywordMatcher) -> None:
        self.matcher = matcher

    def rank(
        self,
        candidates: Iterable[CandidateResponse[SubjectT]],
        text: str,
        *,
        min_score: float = 0.5,
        limit: int | None = None,
    ) -> list[ScoredCandidate[SubjectT]]:
        """Score every candidate and return those reaching ``min_score``, best first.

        Candidates with equal scores keep their original collection order.
        """
        scored = [
            ScoredCandidate(
                candidate=candidate,
                score=self.matcher.calculate_relevance(text, candidate.keywords) * candidate.priority,
            )
            for candidate in candidates
        ]
        kept = [item for item in scored if item.score >= min_score]
        kept.sort(key=lambda item: item.score, reverse=True)
        if limit is not None:
            return kept[: max(limit, 0)]
        return kept

    def best(
        self,
        candidates: Iterable[CandidateResponse[SubjectT]],
        text: str,
        *,
        min_score: float = 0.5,
    ) -> ScoredCandidate[SubjectT] | None:
        ranked = self.rank(candidates, text, min_score=min_score, limit=1)
        return ranked[0] if ranked else None

    def gate(
        self,
        subjects: Sequence[SubjectT],
        predicate: Callable[[SubjectT], bool],
        *,
        limit: int,
    ) -> list[SubjectT]:
        """Keep subjects passing a boolean gate, in collection order, up to ``limit``."""
        matched: list[SubjectT] = []
        if limit <= 0:
            return matched
        for subject in subjects:
            if predicate(subject):
                matched.append(subject)
                if len(matched) >= limit:
                    break
        return matched
