# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Section/key access to the gim config document."""

from __future__ import annotations

import copy
from typing import Any

from gim.config.errors import KeyNotFoundError, SectionNotATableError, SectionNotFoundError
from gim.config.filesystem import HostFilesystem
from gim.config.store import ConfigDocument, ConfigStore, ConfigValue
from gim.logging import get_logger

logger = get_logger(__name__)


def values_equal(left: Any, right: Any) -> bool:
    """Compare two config values structurally.

    Unlike ``==`` this keeps bools and ints apart (``True`` is not ``1``),
    since TOML writes them differently.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, dict) and isinstance(right, dict):
        if left.keys() != right.keys():
            return False
        return all(values_equal(left[k], right[k]) for k in left)
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, (dict, list)) or isinstance(right, (dict, list)):
        return False
    return type(left) is type(right) and left == right


def _section_table(doc: ConfigDocument, section: str) -> dict[str, Any]:
    if section not in doc:
        raise SectionNotFoundError(section)
    table = doc[section]
    if not isinstance(table, dict):
        raise SectionNotATableError(section)
    return table


def get_config(fs: HostFilesystem | None = None) -> ConfigDocument:
    """Load the whole config document, logging the file path."""
    return ConfigStore(fs).load(log_path=True)


def get_value(section: str, key: str, fs: HostFilesystem | None = None) -> ConfigValue:
    """Return a copy of ``section.key`` from the config file.

    Raises:
        SectionNotFoundError: If section is absent
        SectionNotATableError: If section is not a table
        KeyNotFoundError: If key is absent from section
        ConfigError: Any load failure from :meth:`ConfigStore.load`
    """
    doc = ConfigStore(fs).load(log_path=True)
    table = _section_table(doc, section)
    if key not in table:
        raise KeyNotFoundError(section, key)
    return copy.deepcopy(table[key])


def update_value(
    section: str, key: str, value: ConfigValue, fs: HostFilesystem | None = None
) -> bool:
    """Set ``section.key`` to value and persist the whole document.

    Setting a key to the value it already holds writes nothing.

    Returns:
        bool: True if the file was rewritten, False for a no-op

    Raises:
        SectionNotFoundError: If section is absent
        SectionNotATableError: If section is not a table
        SerializeError: If value cannot be written as TOML
        ConfigError: Any load or write failure from the store
    """
    store = ConfigStore(fs)
    doc = store.load(log_path=False)
    table = _section_table(doc, section)

    if key in table and values_equal(table[key], value):
        logger.debug("%s.%s already set; not writing", section, key)
        return False

    table[key] = copy.deepcopy(value)
    store.save(doc)
    return True
