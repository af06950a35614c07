"""Domain layer: pure extraction logic (no I/O, no external libs).

Keep this layer free of side-effects; loaders, settings and logging live in
the outer layers.
"""

from .constants import (
    FALLBACK_SEPARATOR,
    KEYWORD_LENGTH_THRESHOLD,
    MAX_CONTEXT_LENGTH,
    PASSAGE_SEPARATOR,
    PASSAGE_WINDOW,
    SEPARATOR_OVERHEAD,
)
from .context import assemble_excerpt, fallback_excerpt
from .extraction import (
    ExtractionConfig,
    ExtractionReport,
    PassageExtractor,
    extract_relevant_passages,
)
from .keywords import DEFAULT_STOPWORDS, DomainKeywordMapping, KeywordDeriver, KeywordMappingRule
from .passages import Passage, collect_passages, locate_windows, merge_windows
from .selection import SelectedPassage, rank_passages, select_passages

__all__ = [
    "DEFAULT_STOPWORDS",
    "KeywordMappingRule",
    "DomainKeywordMapping",
    "KeywordDeriver",
    "Passage",
    "locate_windows",
    "merge_windows",
    "collect_passages",
    "SelectedPassage",
    "rank_passages",
    "select_passages",
    "PASSAGE_SEPARATOR",
    "FALLBACK_SEPARATOR",
    "assemble_excerpt",
    "fallback_excerpt",
    "MAX_CONTEXT_LENGTH",
    "PASSAGE_WINDOW",
    "KEYWORD_LENGTH_THRESHOLD",
    "SEPARATOR_OVERHEAD",
    "ExtractionConfig",
    "ExtractionReport",
    "PassageExtractor",
    "extract_relevant_passages",
]
