from __future__ import annotations

from typing import Protocol


class TextSourcePort(Protocol):
    """Read-once, serve-from-memory provider of the reference text."""

    file_path: str

    def has_cached(self, path: str) -> bool:  # pragma: no cover - interface
        ...

    def get_cached(self, path: str) -> str | None:  # pragma: no cover - interface
        ...

    def load(self) -> str | None:  # pragma: no cover - interface
        ...
