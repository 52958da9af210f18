# topmark:header:start
#
#   project      : UrlRel
#   file         : constants.py
#   file_relpath : src/urlrel/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UrlRel Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

URLREL_VERSION: str = get_version("urlrel")
