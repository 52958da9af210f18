# topmark:header:start
#
#   project      : UrlRel
#   file         : version.py
#   file_relpath : src/urlrel/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UrlRel `version` command.

Prints the current UrlRel version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from urlrel.cli.cmd_common import get_console, get_effective_verbosity
from urlrel.cli.options import output_format_option
from urlrel.constants import URLREL_VERSION
from urlrel.formats import OutputFormat

if TYPE_CHECKING:
    from urlrel.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of UrlRel.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of UrlRel.

    Args:
        output_format (OutputFormat | None): Optional output format (text, json or ndjson).
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": URLREL_VERSION}))
    elif get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("UrlRel version:", bold=True, underline=True))
        console.print(f"    {console.styled(URLREL_VERSION, bold=True)}")
    else:
        console.print(URLREL_VERSION)
