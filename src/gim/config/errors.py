# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Exceptions raised by the gim config store and accessors."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Base exception for config-related errors."""


class HomeNotFoundError(ConfigError):
    """Raised when the host cannot provide a home directory."""

    def __init__(self) -> None:
        super().__init__("Home directory not found")


class SerializeError(ConfigError):
    """Raised when a document holds a value TOML cannot represent."""


# ------------------------
# Filesystem failures
# ------------------------


class ConfigIOError(ConfigError):
    """Base for filesystem failures; carries the path that triggered them."""

    action = "access"

    def __init__(self, path: Path, reason: object | None = None) -> None:
        self.path = Path(path)
        self.reason = reason
        msg = f"Failed to {self.action} {self.path}"
        if reason is not None:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class DirectoryCreateError(ConfigIOError):
    """Raised when the config directory cannot be created."""

    action = "create config directory"


class ConfigReadError(ConfigIOError):
    """Raised when the config file cannot be read."""

    action = "read config file"


class ConfigWriteError(ConfigIOError):
    """Raised when the config file cannot be written."""

    action = "write config file"


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""

    def __init__(self, path: Path, reason: object) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid TOML in {self.path}: {reason}")


# ------------------------
# Section/key addressing
# ------------------------


class ConfigLookupError(ConfigError):
    """Base for addressing failures: the file was read but a setting is missing."""

    def __init__(self, msg: str, section: str) -> None:
        self.section = section
        super().__init__(msg)


class SectionNotFoundError(ConfigLookupError):
    """Raised when a section is absent from the document."""

    def __init__(self, section: str) -> None:
        super().__init__(f"Section '{section}' not found", section)


class SectionNotATableError(ConfigLookupError):
    """Raised when a section name refers to a plain value instead of a table."""

    def __init__(self, section: str) -> None:
        super().__init__(f"Section '{section}' is not a table", section)


class KeyNotFoundError(ConfigLookupError):
    """Raised when a key is absent from an existing section."""

    def __init__(self, section: str, key: str) -> None:
        self.key = key
        super().__init__(f"Key '{key}' not found in section '{section}'", section)
