# topmark:header:start
#
#   project      : UrlRel
#   file         : errors.py
#   file_relpath : src/urlrel/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the UrlRel library.

All contract violations share one exception type; the message tells them apart.
Callers should treat these as programmer errors rather than transient conditions.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """An argument passed to a UrlRel function violates its contract.

    Raised for non-string arguments, a base URL that is not absolute, and URLs
    whose hosts differ from the base URL's host.
    """


def type_name(value: object) -> str:
    """Return the runtime type name reported in argument errors."""
    return type(value).__name__
