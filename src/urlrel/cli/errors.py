# topmark:header:start
#
#   project      : UrlRel
#   file         : errors.py
#   file_relpath : src/urlrel/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the UrlRel CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from urlrel.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from urlrel.cli.console import ConsoleLike


class UrlrelError(click.ClickException):
    """Base class for all UrlRel CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        # Click shows the error after the context is popped; keep the one it was raised in
        self.ctx: click.Context | None = click.get_current_context(silent=True)

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        obj: Any = self.ctx.obj if self.ctx is not None else None
        console: ConsoleLike | None = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(f"Error: {self.format_message()}")
            return
        super().show(file)


class UrlrelUsageError(UrlrelError):
    """Error for command-line invocation errors (invalid flags/args, invalid URLs)."""

    exit_code = ExitCode.USAGE_ERROR


class UrlrelConfigError(UrlrelError):
    """Error for configuration errors (missing/invalid config file)."""

    exit_code = ExitCode.CONFIG_ERROR

