from __future__ import annotations

from collections.abc import Iterable

from .constants import FALLBACK_SEPARATOR, MAX_CONTEXT_LENGTH, PASSAGE_SEPARATOR


def assemble_excerpt(texts: Iterable[str], *, separator: str = PASSAGE_SEPARATOR) -> str:
    """Join selected passage texts into one prompt-ready excerpt."""
    return separator.join(texts).strip()


def fallback_excerpt(
    document: str, *, max_length: int = MAX_CONTEXT_LENGTH, separator: str = FALLBACK_SEPARATOR
) -> str:
    """Head and tail of the document, each ``max_length // 2`` characters.

    Short documents yield the whole text on both sides of the separator.
    """
    half = max_length // 2
    head = document[:half]
    tail = document[max(0, len(document) - half) :]
    return head + separator + tail
