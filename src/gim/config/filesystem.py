# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Host capabilities used by the config store.

The store never calls ``Path.home()`` or touches files directly; it goes
through a :class:`HostFilesystem` so tests can point it at a temporary
directory or an in-memory fake.
"""

from __future__ import annotations

import abc
import os
from pathlib import Path


class HostFilesystem(abc.ABC):
    """Abstract home-directory lookup and whole-file I/O.

    Implementations raise the host's native ``OSError`` on I/O failure; the
    store translates those into config errors with path context.
    """

    @abc.abstractmethod
    def home(self) -> Path | None:
        """Return the user's home directory, or None if it cannot be determined."""

    @abc.abstractmethod
    def exists(self, path: Path) -> bool:
        """Return True if path exists."""

    @abc.abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create path and any missing parents; existing directories are fine."""

    @abc.abstractmethod
    def read_text(self, path: Path) -> str:
        """Return the full UTF-8 contents of path."""

    @abc.abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Replace the contents of path with content, creating it if needed."""


class LocalFilesystem(HostFilesystem):
    """HostFilesystem backed by the real user environment and disk."""

    def home(self) -> Path | None:
        # An empty HOME would otherwise expand to the filesystem root
        if os.environ.get("HOME") == "":
            return None
        try:
            return Path.home().absolute()
        except (RuntimeError, KeyError):
            return None

    def exists(self, path: Path) -> bool:
        return path.exists()

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def read_text(self, path: Path) -> str:
        with open(path, encoding="utf-8") as f:
            return f.read()

    def write_text(self, path: Path, content: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
