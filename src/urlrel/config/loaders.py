# topmark:header:start
#
#   project      : UrlRel
#   file         : loaders.py
#   file_relpath : src/urlrel/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading UrlRel configuration from
on-disk TOML files (``urlrel.toml`` / ``pyproject.toml``) and for rendering a
configuration dict back to TOML text.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from urlrel.config.keys import Toml
from urlrel.config.logging import get_logger
from urlrel.formats import OutputFormat

if TYPE_CHECKING:
    from pathlib import Path

    from urlrel.config.logging import UrlrelLogger

TomlTable = dict[str, Any]

logger: UrlrelLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return UrlRel's **runtime defaults** as a Python dict.

    This function performs no I/O. ``base_url`` has no default and is therefore
    absent.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults.
    """
    return {
        Toml.KEY_OUTPUT_FORMAT: OutputFormat.TEXT.value,
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``urlrel.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_section(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the UrlRel table of a parsed TOML document.

    For ``pyproject.toml`` this is the ``[tool.urlrel]`` table; any other file
    is a UrlRel file and its top level is returned unchanged.

    Args:
        data (TomlTable): Parsed TOML document.
        path (Path): The file ``data`` was read from.

    Returns:
        TomlTable | None: The UrlRel table, or None if ``pyproject.toml`` has none.
    """
    if path.name != Toml.PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get(Toml.PYPROJECT_TOOL_SECTION, {})
    section: Any = tool.get(Toml.PYPROJECT_TOOL_NAME) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.%s] section in %s", Toml.PYPROJECT_TOOL_NAME, path)
        return None
    return cast("TomlTable", section)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return ``table[key]`` if it is a string; log and return None otherwise."""
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        logger.warning(
            "Ignoring TOML key '%s': expected a string, got %s", key, type(value).__name__
        )
        return None
    return value


def to_toml(data: TomlTable) -> str:
    """Render ``data`` as TOML text, dropping keys whose value is None."""
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for key, value in data.items():
        if value is not None:
            doc.add(key, value)
    return tomlkit.dumps(doc)
