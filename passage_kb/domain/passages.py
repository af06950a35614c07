from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .constants import PASSAGE_WINDOW


@dataclass
class Passage:
    """Half-open character range ``[start, end)`` with a keyword hit count.

    A freshly built window is a passage with ``score == 1``; merging extends
    the range and bumps the score.
    """

    start: int
    end: int
    score: int = 1

    def overlaps(self, start: int, end: int) -> bool:
        # touching boundaries count as overlap
        return start <= self.end and end >= self.start

    def absorb(self, start: int, end: int) -> None:
        self.start = min(self.start, start)
        self.end = max(self.end, end)
        self.score += 1

    @property
    def length(self) -> int:
        return self.end - self.start


def locate_windows(
    document: str,
    keywords: Iterable[str],
    *,
    window: int = PASSAGE_WINDOW,
) -> Iterator[tuple[int, int]]:
    """Yield one ``(start, end)`` window per case-insensitive keyword hit.

    Keywords are scanned one after another; within a keyword the search
    resumes at the end of the previous match, so hits never overlap.
    """
    n = len(document)
    half = window // 2
    for keyword in keywords:
        if not keyword:
            continue
        # match on the original text so offsets stay valid when lowercasing
        # would change the string length
        for m in re.finditer(re.escape(keyword), document, re.IGNORECASE):
            yield max(0, m.start() - half), min(n, m.end() + half)


def merge_windows(windows: Iterable[tuple[int, int]]) -> list[Passage]:
    """Fold windows into passages in arrival order.

    Each window joins the first passage it overlaps, otherwise starts a new
    one. There is no second pass, so two passages that only start overlapping
    after a later extension stay separate.
    """
    passages: list[Passage] = []
    for start, end in windows:
        for p in passages:
            if p.overlaps(start, end):
                p.absorb(start, end)
                break
        else:
            passages.append(Passage(start=start, end=end))
    return passages


def collect_passages(
    document: str, keywords: Iterable[str], *, window: int = PASSAGE_WINDOW
) -> list[Passage]:
    return merge_windows(locate_windows(document, keywords, window=window))
