"""Configuration helpers for gim."""

from __future__ import annotations

from gim.config.accessor import get_config, get_value, update_value
from gim.config.directory import resolve_config_dir
from gim.config.errors import (
    ConfigError,
    ConfigIOError,
    ConfigLookupError,
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
    DirectoryCreateError,
    HomeNotFoundError,
    KeyNotFoundError,
    SectionNotATableError,
    SectionNotFoundError,
    SerializeError,
)
from gim.config.filesystem import HostFilesystem, LocalFilesystem
from gim.config.store import (
    DEFAULT_CONFIG,
    ConfigStore,
    default_config,
    load_config,
    resolve_config_file,
    save_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigError",
    "ConfigIOError",
    "ConfigLookupError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigStore",
    "ConfigWriteError",
    "DirectoryCreateError",
    "HomeNotFoundError",
    "HostFilesystem",
    "KeyNotFoundError",
    "LocalFilesystem",
    "SectionNotATableError",
    "SectionNotFoundError",
    "SerializeError",
    "default_config",
    "get_config",
    "get_value",
    "load_config",
    "resolve_config_dir",
    "resolve_config_file",
    "save_config",
    "update_value",
]
