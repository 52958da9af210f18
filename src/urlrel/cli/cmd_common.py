# topmark:header:start
#
#   project      : UrlRel
#   file         : cmd_common.py
#   file_relpath : src/urlrel/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small plumbing helpers shared by several commands: reading the shared state
from ``ctx.obj`` and resolving the layered configuration.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click

from urlrel.cli.console import ClickConsole
from urlrel.cli.errors import UrlrelConfigError
from urlrel.config import Config, MutableConfig
from urlrel.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from urlrel.cli.console import ConsoleLike
    from urlrel.config.logging import UrlrelLogger

logger: UrlrelLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context, creating a plain one if absent."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output level set by the group (WARNING if unset)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def resolve_config(
    *,
    config_files: Iterable[Path],
    no_config: bool,
    overrides: Mapping[str, Any],
) -> Config:
    """Merge discovered config, ``--config`` files and CLI overrides into a `Config`.

    Args:
        config_files (Iterable[Path]): Files given with ``--config``, in order.
        no_config (bool): Skip discovery in the working directory.
        overrides (Mapping[str, Any]): CLI values; None means "not given".

    Returns:
        Config: The frozen runtime configuration.

    Raises:
        UrlrelConfigError: If a ``--config`` file does not exist.
    """
    extra: list[Path] = list(config_files)
    for path in extra:
        if not path.is_file():
            raise UrlrelConfigError(f"Config file not found: {path}")

    draft: MutableConfig = MutableConfig.load_merged(extra_config_files=extra, no_config=no_config)
    config: Config = draft.apply_cli_args(overrides).freeze()
    logger.debug("Effective config: %s", config)
    return config
