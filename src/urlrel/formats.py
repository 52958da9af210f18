# topmark:header:start
#
#   project      : UrlRel
#   file         : formats.py
#   file_relpath : src/urlrel/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats shared by the CLI and the configuration layer."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        TEXT: Human-friendly text output, one result per line.
        JSON: A single JSON array (machine-readable).
        NDJSON: One JSON object per line (newline-delimited JSON; machine-readable).

    Notes:
        - Machine formats (``JSON`` and ``NDJSON``) must not include ANSI color.
        - Use with [`urlrel.cli.cli_types.EnumChoiceParam`][] to parse
          ``--format`` from Click.
    """

    # Human formats:
    TEXT = "text"

    # Machine formats:
    JSON = "json"
    NDJSON = "ndjson"

    @classmethod
    def parse(cls, value: str) -> OutputFormat | None:
        """Return the member whose value matches ``value`` (case-insensitive), or None."""
        key: str = value.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return None
