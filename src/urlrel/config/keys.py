# topmark:header:start
#
#   project      : UrlRel
#   file         : keys.py
#   file_relpath : src/urlrel/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key and file names for UrlRel configuration.

Keys defined here are *external configuration API* (``urlrel.toml`` and
``[tool.urlrel]`` in ``pyproject.toml``). Renaming or removing a key is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML names used by UrlRel configuration."""

    # Discovery
    CONFIG_FILE_NAME: Final[str] = "urlrel.toml"
    PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
    PYPROJECT_TOOL_SECTION: Final[str] = "tool"
    PYPROJECT_TOOL_NAME: Final[str] = "urlrel"

    # Top-level keys
    KEY_BASE_URL: Final[str] = "base_url"
    KEY_OUTPUT_FORMAT: Final[str] = "output_format"
