from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from .constants import KEYWORD_LENGTH_THRESHOLD

DEFAULT_STOPWORDS: frozenset[str] = frozenset(
    {
        "the",
        "a",
        "an",
        "is",
        "are",
        "was",
        "were",
        "what",
        "which",
        "who",
        "whom",
        "when",
        "where",
        "why",
        "how",
        "does",
        "do",
        "did",
        "has",
        "have",
        "had",
        "in",
        "on",
        "at",
        "to",
        "for",
        "of",
        "with",
        "by",
        "from",
        "about",
        "into",
        "during",
        "his",
        "her",
        "their",
        "its",
        "that",
        "this",
        "these",
        "those",
        "and",
        "or",
        "but",
        "if",
        "then",
        "else",
        "just",
        "before",
        "after",
        # corpus-specific narrative words
        "upriver",
        "start",
        "begins",
        "narrating",
        "story",
        "novella",
    }
)

_PUNCT_RE = re.compile(r"[?.,!]")


def _clean_terms(terms: Iterable[str]) -> tuple[str, ...]:
    out: list[str] = []
    for t in terms:
        s = (t or "").strip().lower()
        if s and s not in out:
            out.append(s)
    return tuple(out)


@dataclass(frozen=True)
class KeywordMappingRule:
    """Adds ``keywords`` whenever the question contains any of ``triggers``.

    Triggers are plain substrings matched against the lowercased question.
    """

    triggers: tuple[str, ...]
    keywords: tuple[str, ...]

    def __post_init__(self) -> None:
        # normalize even when callers pass lists or mixed case
        object.__setattr__(self, "triggers", _clean_terms(self.triggers))
        object.__setattr__(self, "keywords", _clean_terms(self.keywords))

    @classmethod
    def single(cls, trigger: str, keywords: Iterable[str]) -> KeywordMappingRule:
        return cls(triggers=(trigger,), keywords=tuple(keywords))

    def matches(self, question_lower: str) -> bool:
        return any(t in question_lower for t in self.triggers)


@dataclass(frozen=True)
class DomainKeywordMapping:
    """Ordered trigger -> keyword augmentation rules for one reference corpus."""

    domain: str
    rules: tuple[KeywordMappingRule, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))

    def additional_keywords(self, question: str) -> list[str]:
        q = (question or "").lower()
        extra: list[str] = []
        for rule in self.rules:
            if rule.matches(q):
                extra.extend(rule.keywords)
        return extra


class KeywordDeriver:
    """Turn a question into the list of search terms used by the locator.

    Question tokens are filtered by length and stopwords; domain keywords are
    trusted and bypass both filters. The result has no duplicates and keeps
    first-seen order (question tokens first, then domain terms).
    """

    def __init__(
        self,
        mapping: DomainKeywordMapping | None = None,
        *,
        stopwords: Iterable[str] | None = None,
        min_length: int = KEYWORD_LENGTH_THRESHOLD,
    ) -> None:
        self.mapping = mapping
        self.stopwords = frozenset(
            DEFAULT_STOPWORDS if stopwords is None else (w.lower() for w in stopwords)
        )
        self.min_length = int(min_length)

    def tokens(self, question: str) -> list[str]:
        cleaned = _PUNCT_RE.sub("", (question or "").lower())
        return [
            w for w in cleaned.split() if len(w) > self.min_length and w not in self.stopwords
        ]

    def derive(self, question: str) -> list[str]:
        keywords = self.tokens(question)
        if self.mapping is not None:
            keywords.extend(self.mapping.additional_keywords(question))
        return list(dict.fromkeys(keywords))
