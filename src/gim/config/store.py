# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""TOML-backed persistent config store for gim.

The config lives at ``~/.config/gim/config.toml``. The first load creates it
with :data:`DEFAULT_CONFIG`; afterwards it is only rewritten by an explicit
save. Every load reads the file again, nothing is cached between calls.
"""

from __future__ import annotations

import copy
import tomllib
from pathlib import Path
from typing import Any, Union

import tomli_w
from rich.console import Console

from gim.config.directory import resolve_config_dir
from gim.config.errors import (
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
    DirectoryCreateError,
    SerializeError,
)
from gim.config.filesystem import HostFilesystem, LocalFilesystem
from gim.logging import get_logger

CONFIG_FILE_NAME = "config.toml"

ConfigValue = Union[int, str, bool, dict[str, "ConfigValue"]]
ConfigDocument = dict[str, Any]

DEFAULT_CONFIG: ConfigDocument = {
    "update": {
        "tried": 0,
        "max_try": 5,
        "last_try_day": "2000-01-01",
        "try_interval_days": 30,
    },
    "ai": {
        "model": "",
        "apikey": "",
        "url": "",
        "language": "English",
    },
}

logger = get_logger(__name__)
console = Console()


def default_config() -> ConfigDocument:
    """Return a fresh copy of the default document."""
    return copy.deepcopy(DEFAULT_CONFIG)


def dump_document(doc: ConfigDocument) -> str:
    """Serialize a document to TOML text.

    Raises:
        SerializeError: If the document holds a value TOML cannot represent
    """
    try:
        return tomli_w.dumps(doc)
    except (TypeError, ValueError) as e:
        raise SerializeError(f"Cannot serialize config: {e}") from e


def parse_document(content: str, path: Path) -> ConfigDocument:
    """Parse TOML text read from path.

    An empty file is rejected rather than treated as an empty document, so a
    truncated config is never mistaken for one without settings.

    Raises:
        ConfigParseError: If content is empty or not valid TOML
    """
    if not content.strip():
        raise ConfigParseError(path, "file is empty")
    try:
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(path, e) from e


class ConfigStore:
    """Whole-document load/save of the gim config file.

    Args:
        fs (HostFilesystem | None): Host capability for home lookup and file I/O
    """

    def __init__(self, fs: HostFilesystem | None = None) -> None:
        self.fs = fs or LocalFilesystem()

    @property
    def path(self) -> Path:
        """Resolve the config file path (re-resolved on every access)."""
        return resolve_config_dir(self.fs) / CONFIG_FILE_NAME

    def load(self, *, log_path: bool = True) -> ConfigDocument:
        """Load the config, creating it with defaults first if it is absent.

        Args:
            log_path (bool): Print ``Config file is <path>`` on stdout

        Returns:
            ConfigDocument: A freshly parsed document

        Raises:
            HomeNotFoundError: If the home directory cannot be determined
            DirectoryCreateError: If the config directory cannot be created
            SerializeError: If the default document cannot be serialized
            ConfigWriteError: If the default file cannot be written
            ConfigReadError: If the file cannot be checked or read
            ConfigParseError: If the file is empty or not valid TOML
        """
        path = self.path
        try:
            present = self.fs.exists(path)
        except OSError as e:
            raise ConfigReadError(path, e) from e
        if not present:
            self._bootstrap(path)

        if log_path:
            console.out(f"Config file is {path}", highlight=False)

        try:
            content = self.fs.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(path, e) from e
        return parse_document(content, path)

    def save(self, doc: ConfigDocument) -> Path:
        """Overwrite the config file with doc and return the path written.

        The write is not atomic.

        Raises:
            SerializeError: If doc holds a value TOML cannot represent
            HomeNotFoundError: If the home directory cannot be determined
            ConfigWriteError: If the file cannot be written
        """
        content = dump_document(doc)
        path = self.path
        self._write(path, content)
        logger.debug("Saved config to %s", path)
        return path

    def _bootstrap(self, path: Path) -> None:
        logger.debug("Config file %s missing; writing defaults", path)
        try:
            self.fs.make_dirs(path.parent)
        except OSError as e:
            raise DirectoryCreateError(path.parent, e) from e
        self._write(path, dump_document(DEFAULT_CONFIG))

    def _write(self, path: Path, content: str) -> None:
        try:
            self.fs.write_text(path, content)
        except OSError as e:
            raise ConfigWriteError(path, e) from e


def resolve_config_file(fs: HostFilesystem | None = None) -> Path:
    """Return ``<home>/.config/gim/config.toml`` without touching the disk."""
    return ConfigStore(fs).path


def load_config(*, log_path: bool = True, fs: HostFilesystem | None = None) -> ConfigDocument:
    """Load the config document, bootstrapping defaults on first use."""
    return ConfigStore(fs).load(log_path=log_path)


def save_config(doc: ConfigDocument, fs: HostFilesystem | None = None) -> Path:
    """Persist doc as the config document and return the file path."""
    return ConfigStore(fs).save(doc)
