"""Keyword-density passage extraction for prompt grounding."""

from passage_kb.domain import (
    DomainKeywordMapping,
    ExtractionConfig,
    KeywordMappingRule,
    PassageExtractor,
    extract_relevant_passages,
)

__all__ = [
    "DomainKeywordMapping",
    "ExtractionConfig",
    "KeywordMappingRule",
    "PassageExtractor",
    "extract_relevant_passages",
]

__version__ = "0.1.0"
