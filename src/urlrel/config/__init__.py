# topmark:header:start
#
#   project      : UrlRel
#   file         : __init__.py
#   file_relpath : src/urlrel/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for UrlRel.

`MutableConfig` collects layered configuration (defaults, ``pyproject.toml``,
``urlrel.toml``, ``--config`` files, CLI overrides) and `MutableConfig.freeze`
produces the immutable `Config` used at runtime.
"""

from __future__ import annotations

from urlrel.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
