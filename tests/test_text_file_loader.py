from __future__ import annotations

from pathlib import Path

import pytest

from passage_kb.exceptions import ConfigurationError, DocumentLoadError, DocumentNotFoundError
from passage_kb.infra.loaders import CachedTextFileLoader


def test_load_reads_and_caches(tmp_path: Path) -> None:
    (tmp_path / "book.txt").write_text("Call me Ishmael.", encoding="utf-8")
    loader = CachedTextFileLoader(tmp_path, "book.txt")
    assert not loader.has_cached(loader.file_path)

    assert loader.load() == "Call me Ishmael."
    assert loader.has_cached(loader.file_path)
    assert loader.get_cached(loader.file_path) == "Call me Ishmael."
    assert loader.cached_paths() == [loader.file_path]


def test_read_text_serves_from_cache(tmp_path: Path) -> None:
    f = tmp_path / "book.txt"
    f.write_text("first", encoding="utf-8")
    loader = CachedTextFileLoader(tmp_path, "book.txt")
    assert loader.read_text() == "first"
    f.write_text("second", encoding="utf-8")
    assert loader.read_text() == "first"
    loader.clear_cache(loader.file_path)
    assert loader.read_text() == "second"


def test_clear_cache_without_path_clears_all(tmp_path: Path) -> None:
    (tmp_path / "book.txt").write_text("text", encoding="utf-8")
    loader = CachedTextFileLoader(tmp_path, "book.txt")
    loader.load()
    loader.clear_cache()
    assert loader.cached_paths() == []


def test_empty_file_returns_none_and_is_not_cached(tmp_path: Path) -> None:
    (tmp_path / "empty.txt").write_text("", encoding="utf-8")
    loader = CachedTextFileLoader(tmp_path, "empty.txt")
    assert loader.load() is None
    assert not loader.has_cached(loader.file_path)


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    loader = CachedTextFileLoader(tmp_path, "missing.txt")
    with pytest.raises(DocumentNotFoundError, match="File not found: missing.txt"):
        loader.load()


def test_unreadable_file_raises_load_error(tmp_path: Path) -> None:
    (tmp_path / "latin.txt").write_bytes(b"\xff\xfe\xfa broken")
    loader = CachedTextFileLoader(tmp_path, "latin.txt")
    with pytest.raises(DocumentLoadError):
        loader.load()


def test_unsupported_extension_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        CachedTextFileLoader(tmp_path, "model.bin")
