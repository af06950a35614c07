from __future__ import annotations

from passage_kb.domain.passages import Passage, collect_passages, locate_windows, merge_windows


def test_window_surrounds_hit_and_is_clamped() -> None:
    doc = "abc Kurtz def"
    assert list(locate_windows(doc, ["kurtz"], window=4)) == [(2, 11)]
    assert list(locate_windows(doc, ["kurtz"], window=1500)) == [(0, len(doc))]


def test_search_is_case_insensitive() -> None:
    doc = "ALPHA beta Alpha"
    assert len(list(locate_windows(doc, ["alpha"], window=0))) == 2


def test_hits_of_one_keyword_never_overlap() -> None:
    assert list(locate_windows("aaaa", ["aa"], window=0)) == [(0, 2), (2, 4)]


def test_keywords_are_scanned_in_order() -> None:
    doc = "two one"
    assert list(locate_windows(doc, ["one", "two"], window=0)) == [(4, 7), (0, 3)]


def test_empty_keyword_is_ignored() -> None:
    assert list(locate_windows("text", ["", "text"], window=0)) == [(0, 4)]


def test_adjacent_windows_merge() -> None:
    out = merge_windows([(0, 10), (10, 20)])
    assert out == [Passage(start=0, end=20, score=2)]


def test_disjoint_windows_stay_apart() -> None:
    out = merge_windows([(0, 10), (11, 20)])
    assert out == [Passage(0, 10, 1), Passage(11, 20, 1)]


def test_window_joins_first_overlapping_passage_only() -> None:
    # the bridging window extends the first passage, which now overlaps the
    # second; there is no follow-up pass joining them
    out = merge_windows([(0, 10), (20, 30), (9, 21)])
    assert out == [Passage(0, 21, 2), Passage(20, 30, 1)]


def test_repeated_hits_raise_score() -> None:
    doc = "kurtz " * 5
    out = collect_passages(doc, ["kurtz"], window=100)
    assert len(out) == 1
    assert out[0].score == 5
    assert (out[0].start, out[0].end) == (0, len(doc))
    assert out[0].length == len(doc)


def test_no_keywords_no_passages() -> None:
    assert collect_passages("some text", []) == []


def test_offsets_stay_valid_when_lowercase_changes_length() -> None:
    # "İ".lower() is two characters; offsets must still point into the original
    doc = "İ" * 3 + "Kurtz"
    assert list(locate_windows(doc, ["kurtz"], window=0)) == [(3, 8)]
    start, end = next(locate_windows("İ" * 2000 + "kurtz", ["kurtz"], window=10))
    assert (start, end) == (1995, 2005)
