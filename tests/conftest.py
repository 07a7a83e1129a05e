"""Test configuration and global fixtures for gim tests."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
from pathlib import Path

import pytest

from gim.config.filesystem import HostFilesystem


class MemoryFilesystem(HostFilesystem):
    """In-memory HostFilesystem that records writes and can inject failures."""

    def __init__(self, home: Path | None = Path("/home/tester")):
        self._home = home
        self.files: dict[Path, str] = {}
        self.dirs: set[Path] = set()
        self.writes: list[Path] = []
        self.fail_exists: OSError | None = None
        self.fail_make_dirs: OSError | None = None
        self.fail_read: OSError | None = None
        self.fail_write: OSError | None = None

    def home(self) -> Path | None:
        return self._home

    def exists(self, path: Path) -> bool:
        if self.fail_exists is not None:
            raise self.fail_exists
        return path in self.files or path in self.dirs

    def make_dirs(self, path: Path) -> None:
        if self.fail_make_dirs is not None:
            raise self.fail_make_dirs
        self.dirs.add(path)

    def read_text(self, path: Path) -> str:
        if self.fail_read is not None:
            raise self.fail_read
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def write_text(self, path: Path, content: str) -> None:
        if self.fail_write is not None:
            raise self.fail_write
        self.files[path] = content
        self.writes.append(path)


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path):
    """Point HOME at a temporary directory so tests never touch the real profile."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("GIM_LOG_LEVEL", raising=False)
    return home


@pytest.fixture
def config_file(isolated_home):
    """Path where the config file lives under the isolated home."""
    return isolated_home / ".config" / "gim" / "config.toml"


@pytest.fixture
def write_config(config_file):
    """Seed the config file with the given raw text."""

    def _write(content: str):
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text(content, encoding="utf-8")
        return config_file

    return _write


@pytest.fixture
def memory_fs():
    """Fresh in-memory filesystem rooted at a fake home directory."""
    return MemoryFilesystem()
