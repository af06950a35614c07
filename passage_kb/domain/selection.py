from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .constants import MAX_CONTEXT_LENGTH, PASSAGE_SEPARATOR, SEPARATOR_OVERHEAD
from .passages import Passage


@dataclass(frozen=True)
class SelectedPassage:
    start: int
    end: int
    score: int
    text: str


def rank_passages(passages: Iterable[Passage]) -> list[Passage]:
    """Highest score first; earlier passages win ties."""
    return sorted(passages, key=lambda p: (-p.score, p.start))


def _intersects(p: Passage, used: list[tuple[int, int]]) -> bool:
    return any(p.start < u_end and p.end > u_start for u_start, u_end in used)


def select_passages(
    document: str,
    passages: Iterable[Passage],
    *,
    max_length: int = MAX_CONTEXT_LENGTH,
    separator: str = PASSAGE_SEPARATOR,
    overhead: int = SEPARATOR_OVERHEAD,
) -> list[SelectedPassage]:
    """Greedily take ranked, non-overlapping passages until the budget runs out.

    The running length counts one separator per accepted passage. The first
    passage that does not fit ends the selection; nothing after it is tried.
    """
    used: list[tuple[int, int]] = []
    running = 0
    selected: list[SelectedPassage] = []
    for p in rank_passages(passages):
        if _intersects(p, used):
            continue
        text = document[p.start : p.end].strip()
        if not text:
            continue
        if running + len(text) + overhead > max_length:
            break
        used.append((p.start, p.end))
        running += len(separator) + len(text)
        selected.append(SelectedPassage(start=p.start, end=p.end, score=p.score, text=text))
    return selected
