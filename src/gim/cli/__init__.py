# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Command-line interface for inspecting and editing the gim config."""

from __future__ import annotations

import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import rich_click as click
import tomli_w

from gim.__about__ import __version__
from gim.config import ConfigError, get_config, get_value, resolve_config_file, update_value
from gim.config.store import dump_document
from gim.logging import init_cli_logging, logger

# Types a value typed on the command line may take; anything else stays a string
SCALAR_TYPES = (bool, int, str, dict)


@contextmanager
def _config_errors() -> Iterator[None]:
    """Turn config failures into a clean CLI error with exit status 1."""
    try:
        yield
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


def parse_cli_value(raw: str) -> Any:
    """Interpret raw as a TOML literal, falling back to a plain string.

    ``3`` becomes an int, ``true`` a bool, ``'{ a = 1 }'`` a table. Bare words,
    dates and anything else outside int/str/bool/table are kept verbatim.
    """
    try:
        value = tomllib.loads(f"value = {raw}")["value"]
    except tomllib.TOMLDecodeError:
        return raw
    if not isinstance(value, SCALAR_TYPES):
        return raw
    return value


def format_value(value: Any) -> str:
    """Render a config value for the terminal."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return tomli_w.dumps(value).rstrip("\n")
    return tomli_w.dumps({"value": value}).split("=", 1)[1].strip()


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="gim-config")
def gim_config(*, verbose: bool) -> None:
    """Inspect and edit the gim configuration file."""
    init_cli_logging(verbose=verbose)


@gim_config.command()
def path() -> None:
    """Print the config file location without creating it."""
    with _config_errors():
        click.echo(str(resolve_config_file()))


@gim_config.command()
def show() -> None:
    """Print the whole config document."""
    with _config_errors():
        doc = get_config()
    click.echo(dump_document(doc).rstrip("\n"))


@gim_config.command(name="get")
@click.argument("section")
@click.argument("key")
def get_cmd(section: str, key: str) -> None:
    """Print the value of SECTION.KEY."""
    with _config_errors():
        value = get_value(section, key)
    click.echo(format_value(value))


@gim_config.command(name="set")
@click.argument("section")
@click.argument("key")
@click.argument("value")
def set_cmd(section: str, key: str, value: str) -> None:
    """Set SECTION.KEY to VALUE (parsed as a TOML literal when possible)."""
    parsed = parse_cli_value(value)
    with _config_errors():
        changed = update_value(section, key, parsed)
    if changed:
        logger.info("Updated %s.%s", section, key)
    else:
        logger.info("%s.%s unchanged", section, key)
