# topmark:header:start
#
#   project      : UrlRel
#   file         : __init__.py
#   file_relpath : src/urlrel/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UrlRel package.

UrlRel computes the relative reference from a base URL to another URL, for
example to rewrite asset references in generated stylesheets. It exposes a
small typed API and a CLI.

Examples:
    ```python
    from urlrel import make_relative

    base = "http://example.com/webmozart/puli"
    make_relative(base + "/css/style.css", base)
    # "css/style.css"
    ```
"""

from __future__ import annotations

from urlrel.errors import InvalidArgumentError
from urlrel.paths import canonicalize
from urlrel.url import ParsedUrl, is_absolute_url, make_relative, parse_url, split_url

__all__ = [
    "InvalidArgumentError",
    "ParsedUrl",
    "canonicalize",
    "is_absolute_url",
    "make_relative",
    "parse_url",
    "split_url",
]
