# topmark:header:start
#
#   project      : UrlRel
#   file         : config.py
#   file_relpath : src/urlrel/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UrlRel `config` command.

Prints the effective configuration (defaults merged with discovered files and
``--config`` files) as TOML.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from urlrel.cli.cmd_common import get_console, get_effective_verbosity, resolve_config
from urlrel.cli.options import common_config_options

if TYPE_CHECKING:
    from pathlib import Path

    from urlrel.cli.console import ConsoleLike
    from urlrel.config import Config


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
)
@common_config_options
def config_command(
    *,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Show the effective configuration as TOML."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = resolve_config(config_files=config_files, no_config=no_config, overrides={})

    if get_effective_verbosity(ctx) <= logging.INFO:
        sources: str = ", ".join(str(p) for p in config.config_files) or "<defaults only>"
        console.print(f"# Config files: {sources}")
    console.print(config.to_toml(), nl=False)
