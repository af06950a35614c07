from __future__ import annotations

from passage_kb.domain.passages import Passage
from passage_kb.domain.selection import rank_passages, select_passages


def test_rank_by_score_then_position() -> None:
    ranked = rank_passages([Passage(100, 200, 1), Passage(0, 50, 1), Passage(300, 400, 3)])
    assert [p.start for p in ranked] == [300, 0, 100]


def test_overlapping_lower_ranked_passage_is_skipped() -> None:
    doc = "x" * 40
    sel = select_passages(doc, [Passage(10, 30, 1), Passage(0, 20, 2)])
    assert [(s.start, s.end) for s in sel] == [(0, 20)]


def test_touching_passages_can_both_be_selected() -> None:
    doc = "y" * 20
    sel = select_passages(doc, [Passage(0, 10, 1), Passage(10, 20, 1)])
    assert len(sel) == 2


def test_budget_counts_separators_and_overhead() -> None:
    doc = "a" * 100
    sel = select_passages(doc, [Passage(0, 50, 2), Passage(50, 100, 1)], max_length=70)
    # 0 + 50 + 10 fits; 57 + 50 + 10 does not
    assert [(s.start, s.end) for s in sel] == [(0, 50)]


def test_selection_stops_at_first_passage_over_budget() -> None:
    doc = "b" * 105
    passages = [Passage(0, 60, 3), Passage(60, 100, 2), Passage(100, 105, 1)]
    sel = select_passages(doc, passages, max_length=85)
    # the 5-char passage would still fit but is never reached
    assert [s.score for s in sel] == [3]


def test_passage_text_is_trimmed() -> None:
    doc = "   hello   "
    sel = select_passages(doc, [Passage(0, len(doc), 1)])
    assert sel[0].text == "hello"


def test_selection_order_is_priority_not_position() -> None:
    doc = "c" * 300
    sel = select_passages(doc, [Passage(0, 50, 1), Passage(200, 250, 4)])
    assert [s.start for s in sel] == [200, 0]


def test_whitespace_only_passage_is_skipped() -> None:
    doc = "   abc"
    sel = select_passages(doc, [Passage(0, 3, 5), Passage(3, 6, 1)])
    assert [s.text for s in sel] == ["abc"]
