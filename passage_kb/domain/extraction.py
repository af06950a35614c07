from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .constants import (
    FALLBACK_SEPARATOR,
    KEYWORD_LENGTH_THRESHOLD,
    MAX_CONTEXT_LENGTH,
    PASSAGE_SEPARATOR,
    PASSAGE_WINDOW,
    SEPARATOR_OVERHEAD,
)
from .context import assemble_excerpt, fallback_excerpt
from .keywords import DomainKeywordMapping, KeywordDeriver
from .passages import Passage, collect_passages
from .selection import SelectedPassage, select_passages


@dataclass(frozen=True)
class ExtractionConfig:
    max_context_length: int = MAX_CONTEXT_LENGTH
    passage_window: int = PASSAGE_WINDOW
    keyword_length_threshold: int = KEYWORD_LENGTH_THRESHOLD
    separator: str = PASSAGE_SEPARATOR
    fallback_separator: str = FALLBACK_SEPARATOR
    separator_overhead: int = SEPARATOR_OVERHEAD


@dataclass(frozen=True)
class ExtractionReport:
    """Everything one extraction produced, for logging and machine output."""

    text: str
    keywords: list[str] = field(default_factory=list)
    passages: list[Passage] = field(default_factory=list)
    selected: list[SelectedPassage] = field(default_factory=list)
    used_fallback: bool = False


class PassageExtractor:
    """Keyword-density passage extraction over a single reference text.

    Stateless apart from the configuration given at construction, so one
    instance can serve concurrent questions over the same document.
    """

    def __init__(
        self,
        mapping: DomainKeywordMapping | None = None,
        *,
        stopwords: Iterable[str] | None = None,
        config: ExtractionConfig | None = None,
    ) -> None:
        self.cfg = config or ExtractionConfig()
        self.deriver = KeywordDeriver(
            mapping, stopwords=stopwords, min_length=self.cfg.keyword_length_threshold
        )

    @property
    def mapping(self) -> DomainKeywordMapping | None:
        return self.deriver.mapping

    def analyze(self, document: str, question: str) -> ExtractionReport:
        if not document:
            return ExtractionReport(text="")

        keywords = self.deriver.derive(question)
        passages = collect_passages(document, keywords, window=self.cfg.passage_window)
        selected = select_passages(
            document,
            passages,
            max_length=self.cfg.max_context_length,
            separator=self.cfg.separator,
            overhead=self.cfg.separator_overhead,
        )
        if selected:
            text = assemble_excerpt((s.text for s in selected), separator=self.cfg.separator)
            return ExtractionReport(
                text=text, keywords=keywords, passages=passages, selected=selected
            )

        text = fallback_excerpt(
            document,
            max_length=self.cfg.max_context_length,
            separator=self.cfg.fallback_separator,
        )
        return ExtractionReport(
            text=text, keywords=keywords, passages=passages, used_fallback=True
        )

    def extract_relevant_passages(self, document: str, question: str) -> str:
        return self.analyze(document, question).text


def extract_relevant_passages(
    document: str, question: str, mapping: DomainKeywordMapping | None = None
) -> str:
    """One-shot helper using the default configuration."""
    return PassageExtractor(mapping).extract_relevant_passages(document, question)
