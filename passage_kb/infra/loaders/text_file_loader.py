from __future__ import annotations

import re
from pathlib import Path

from passage_kb.exceptions import ConfigurationError, DocumentLoadError, DocumentNotFoundError

_ALLOWED_EXT_RE = re.compile(r"\.(txt|csv|json|md)$", re.IGNORECASE)


class CachedTextFileLoader:
    """Read a UTF-8 text file once and serve later reads from memory.

    The cache is keyed by the resolved ``file_path``.
    """

    def __init__(self, data_dir: str | Path, file_name: str) -> None:
        if not _ALLOWED_EXT_RE.search(file_name or ""):
            raise ConfigurationError(f"Unsupported reference file type: {file_name!r}")
        self.file_name = file_name
        self.file_path = str((Path(data_dir) / file_name).resolve())
        self._contents: dict[str, str] = {}

    def load(self) -> str | None:
        """Read the file, cache it, and return its text (None when empty)."""
        try:
            content = Path(self.file_path).read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DocumentNotFoundError(
                f'Error reading file "{self.file_path}": File not found: {self.file_name}'
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f'Error reading file "{self.file_path}": {exc}') from exc

        if not content:
            return None
        self._contents[self.file_path] = content
        return content

    def read_text(self) -> str | None:
        cached = self.get_cached(self.file_path)
        return cached if cached is not None else self.load()

    def has_cached(self, path: str) -> bool:
        return path in self._contents

    def get_cached(self, path: str) -> str | None:
        return self._contents.get(path)

    def clear_cache(self, path: str | None = None) -> None:
        if path:
            self._contents.pop(path, None)
        else:
            self._contents.clear()

    def cached_paths(self) -> list[str]:
        return list(self._contents)
