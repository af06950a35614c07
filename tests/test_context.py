from __future__ import annotations

from passage_kb.domain.context import FALLBACK_SEPARATOR, assemble_excerpt, fallback_excerpt


def test_assemble_joins_with_separator() -> None:
    assert assemble_excerpt(["first", "second"]) == "first\n\n---\n\nsecond"


def test_assemble_single_passage_has_no_separator() -> None:
    assert assemble_excerpt(["only"]) == "only"


def test_fallback_takes_exact_head_and_tail() -> None:
    doc = "H" * 12500 + "M" * 1000 + "T" * 12500
    out = fallback_excerpt(doc)
    assert out == "H" * 12500 + FALLBACK_SEPARATOR + "T" * 12500
    assert "M" not in out


def test_fallback_on_short_document_repeats_it() -> None:
    assert fallback_excerpt("abc") == "abc\n\n[...]\n\nabc"


def test_fallback_respects_custom_budget() -> None:
    doc = "0123456789"
    assert fallback_excerpt(doc, max_length=4) == "01" + FALLBACK_SEPARATOR + "89"
