# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Rich-backed logging for the gim CLI.

Library modules only create loggers under the ``gim`` namespace; handlers are
installed once, by the CLI, through :func:`init_cli_logging`.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "GIM_LOG_LEVEL"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the ``gim`` logger, or a named logger below it."""
    return logging.getLogger(name or "gim")


logger = get_logger()


def resolve_log_level(*, verbose: bool = False) -> str:
    """Pick the CLI log level.

    A valid level name in ``GIM_LOG_LEVEL`` wins over ``--verbose``.
    """
    env_level = os.getenv(LOG_LEVEL_ENV, "").upper()
    if env_level in VALID_LEVELS:
        return env_level
    return "DEBUG" if verbose else "INFO"


def init_cli_logging(*, verbose: bool = False) -> logging.Logger:
    """Route log records to stderr through rich and return the ``gim`` logger.

    Stdout stays reserved for command output such as config values.
    """
    level = getattr(logging, resolve_log_level(verbose=verbose))

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        enable_link_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)

    logger.setLevel(level)
    return logger
