# topmark:header:start
#
#   project      : UrlRel
#   file         : __main__.py
#   file_relpath : src/urlrel/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running UrlRel via ``python -m urlrel``.

Equivalent to running the ``urlrel`` console script.

Examples:
    ```sh
    python -m urlrel relative --base http://example.com/webmozart/puli /css/style.css
    ```
"""

from __future__ import annotations

from urlrel.cli.main import cli

if __name__ == "__main__":
    cli()
