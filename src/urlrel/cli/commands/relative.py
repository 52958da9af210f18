# topmark:header:start
#
#   project      : UrlRel
#   file         : relative.py
#   file_relpath : src/urlrel/cli/commands/relative.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UrlRel `relative` command.

Makes each given URL relative to a base URL and prints the results, in input
order, as text, JSON or NDJSON.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from urlrel.cli.cmd_common import get_console, get_effective_verbosity, resolve_config
from urlrel.cli.errors import UrlrelUsageError
from urlrel.cli.options import common_config_options, output_format_option
from urlrel.config.logging import get_logger
from urlrel.errors import InvalidArgumentError
from urlrel.formats import OutputFormat
from urlrel.url import make_relative

if TYPE_CHECKING:
    from pathlib import Path

    from urlrel.cli.console import ConsoleLike
    from urlrel.config import Config
    from urlrel.config.logging import UrlrelLogger

logger: UrlrelLogger = get_logger(__name__)


def read_stdin_urls() -> list[str]:
    """Return the non-blank lines of STDIN, stripped."""
    stream = click.get_text_stream("stdin")
    return [line.strip() for line in stream if line.strip()]


def relativize_all(urls: list[str], base_url: str) -> list[dict[str, str]]:
    """Make every URL relative to ``base_url``.

    Raises:
        UrlrelUsageError: On the first URL that cannot be made relative; nothing
            is printed in that case.
    """
    results: list[dict[str, str]] = []
    for url in urls:
        try:
            relative: str = make_relative(url, base_url)
        except InvalidArgumentError as exc:
            raise UrlrelUsageError(str(exc)) from exc
        results.append({"url": url, "base": base_url, "relative": relative})
    return results


def emit_results(
    console: ConsoleLike,
    results: list[dict[str, str]],
    *,
    output_format: OutputFormat,
    verbosity: int,
) -> None:
    """Print ``results`` in ``output_format``."""
    if output_format == OutputFormat.JSON:
        console.print(json.dumps(results, indent=2))
    elif output_format == OutputFormat.NDJSON:
        for item in results:
            console.print(json.dumps(item))
    else:  # Plain text (default)
        for item in results:
            if verbosity <= logging.INFO:
                arrow: str = console.styled("->", dim=True)
                shown: str = console.styled(item["relative"], bold=True)
                console.print(f"{item['url']} {arrow} {shown}")
            else:
                console.print(item["relative"])


@click.command(
    name="relative",
    help="Make URLS relative to a base URL.",
)
@click.argument("urls", nargs=-1)
@click.option(
    "-b",
    "--base",
    "base_url",
    default=None,
    help="Absolute base URL (defaults to 'base_url' from the configuration).",
)
@click.option(
    "--stdin",
    "stdin",
    is_flag=True,
    default=False,
    help="Also read URLs from STDIN, one per line.",
)
@output_format_option
@common_config_options
def relative_command(
    *,
    urls: tuple[str, ...],
    base_url: str | None,
    stdin: bool,
    output_format: OutputFormat | None,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Make URLS relative to a base URL.

    Args:
        urls (tuple[str, ...]): URLs given as arguments.
        base_url (str | None): Base URL from ``--base``.
        stdin (bool): Whether to read more URLs from STDIN.
        output_format (OutputFormat | None): Output format from ``--format``.
        config_files (tuple[Path, ...]): Extra config files from ``--config``.
        no_config (bool): Whether to skip config discovery.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = resolve_config(
        config_files=config_files,
        no_config=no_config,
        overrides={"base_url": base_url, "output_format": output_format},
    )
    if config.base_url is None:
        raise UrlrelUsageError(
            "No base URL given: pass --base or set 'base_url' in the configuration."
        )

    inputs: list[str] = list(urls)
    if stdin:
        inputs.extend(read_stdin_urls())
    if not inputs:
        raise UrlrelUsageError("No URLs given: pass URLS or --stdin.")

    logger.info("Relativizing %d URL(s) against %s", len(inputs), config.base_url)
    results: list[dict[str, str]] = relativize_all(inputs, config.base_url)
    emit_results(
        console,
        results,
        output_format=config.output_format,
        verbosity=get_effective_verbosity(ctx),
    )
