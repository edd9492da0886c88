"""Lookup of files that may be built in to the program instead of on disk."""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import IO, Union

PathLike = Union[str, "os.PathLike[str]"]


class FileRegistry:
    """Holds built-in file contents that take precedence over files on disk."""

    def __init__(self) -> None:
        self._files: dict[Path, str] = {}

    def register(self, path: PathLike, content: str) -> None:
        """Make ``content`` available under ``path``, replacing any earlier entry."""
        self._files[Path(path)] = str(content)

    def __contains__(self, path: object) -> bool:
        try:
            return Path(path) in self._files  # type: ignore[arg-type]
        except TypeError:
            return False

    def load(self, path: PathLike) -> str:
        """Return the whole content of ``path``, built-in or from disk."""
        key = Path(path)
        if key in self._files:
            return self._files[key]
        return key.read_bytes().decode("utf-8")

    def open(self, path: PathLike) -> IO[str]:
        """Open ``path`` for reading as text, preferring a built-in file."""
        key = Path(path)
        if key in self._files:
            return io.StringIO(self._files[key])
        return open(key, encoding="utf-8", newline="")


_default_registry = FileRegistry()


def register_file(path: PathLike, content: str) -> None:
    """Register a built-in file in the shared registry."""
    _default_registry.register(path, content)


def load_file(path: PathLike) -> str:
    """Load a file through the shared registry."""
    return _default_registry.load(path)


def open_file(path: PathLike) -> IO[str]:
    """Open a file through the shared registry."""
    return _default_registry.open(path)