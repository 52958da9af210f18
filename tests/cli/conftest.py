# topmark:header:start
#
#   project      : UrlRel
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running UrlRel through Click's test runner."""

from __future__ import annotations

from typing import IO, Any, Iterator, Sequence

import pytest
from click.testing import CliRunner, Result

from urlrel.cli.exit_codes import ExitCode
from urlrel.cli.main import cli
from urlrel.config.logging import TRACE_LEVEL, setup_logging


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Re-attach the root handler to the real stdout after each CLI invocation.

    The CLI configures logging on the runner's temporary stdout, which is closed
    once the invocation returns.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in the current working directory.

    Combine with the ``isolation`` fixture so config discovery does not pick up
    files from the repository.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input for ``--stdin``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
