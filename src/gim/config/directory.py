# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Resolution of the gim config directory."""

from __future__ import annotations

from pathlib import Path

from gim.config.errors import HomeNotFoundError
from gim.config.filesystem import HostFilesystem, LocalFilesystem

CONFIG_DIR_RELATIVE = Path(".config") / "gim"


def resolve_config_dir(fs: HostFilesystem | None = None) -> Path:
    """Return ``<home>/.config/gim``.

    The home directory is looked up on every call, so a changed environment
    (e.g. a new ``HOME``) is picked up immediately.

    Args:
        fs (HostFilesystem | None): Host capability to query; defaults to the local host

    Returns:
        Path: The config directory. It is not created here.

    Raises:
        HomeNotFoundError: If the home directory cannot be determined
    """
    home = (fs or LocalFilesystem()).home()
    if home is None:
        raise HomeNotFoundError
    return home / CONFIG_DIR_RELATIVE
