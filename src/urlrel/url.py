# topmark:header:start
#
#   project      : UrlRel
#   file         : url.py
#   file_relpath : src/urlrel/url.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Make URLs relative to a base URL.

This module is the library entry point of UrlRel. It splits URLs into their
root (``scheme://authority``) and path, checks that target and base share the
same root, and delegates the path arithmetic to [`urlrel.paths`][urlrel.paths].

URLs are split with `urllib.parse.urlsplit`; only scheme, credentials, host,
port and path are used, and the query/fragment tail is carried through as
written. Nothing is percent-decoded or re-encoded, and no scheme gets special
treatment.

Examples:
    ```python
    from urlrel import make_relative

    make_relative("http://example.com/webmozart/css/style.css", "http://example.com/webmozart/puli")
    # "../css/style.css"
    make_relative("/css/style.css?v=2", "http://example.com/webmozart/puli")
    # "../../css/style.css?v=2"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final
from urllib.parse import SplitResult, urlsplit

from urlrel.config.logging import get_logger
from urlrel.errors import InvalidArgumentError, type_name
from urlrel.paths import SEPARATOR, make_relative_path, split_query

if TYPE_CHECKING:
    from urlrel.config.logging import UrlrelLogger

logger: UrlrelLogger = get_logger(__name__)

SCHEME_SEPARATOR: Final[str] = "://"


@dataclass(frozen=True)
class ParsedUrl:
    """The parts of a URL that matter for relativization.

    Attributes:
        scheme (str | None): Scheme as written, without ``://``; ``None`` for
            references without an authority.
        netloc (str): Authority as written (``user:pw@host:port``), or ``""``.
        username (str | None): User name from the authority, if any.
        password (str | None): Password from the authority, if any.
        hostname (str | None): Lower-cased host (IPv6 literals without brackets).
        port (str | None): Port text after the host; ``None`` when absent or empty.
        path (str): Path; ``/`` when an authority is present but no path.
        query (str): Raw ``?query`` / ``#fragment`` tail, or ``""``.
    """

    scheme: str | None
    netloc: str
    username: str | None
    password: str | None
    hostname: str | None
    port: str | None
    path: str
    query: str = ""

    @property
    def has_authority(self) -> bool:
        """Whether the URL starts with ``scheme://``."""
        return self.scheme is not None

    @property
    def is_absolute(self) -> bool:
        """Whether the URL has a scheme and a non-empty host."""
        return self.has_authority and bool(self.hostname)

    @property
    def root(self) -> str:
        """``scheme://netloc`` as written, or ``""`` for references without an authority."""
        if self.scheme is None:
            return ""
        return f"{self.scheme}{SCHEME_SEPARATOR}{self.netloc}"

    def same_origin(self, other: ParsedUrl) -> bool:
        """Compare roots: scheme and host case-insensitively, credentials and port exactly."""
        return (
            (self.scheme or "").lower() == (other.scheme or "").lower()
            and self.hostname == other.hostname
            and self.username == other.username
            and self.password == other.password
            and self.port == other.port
        )


def _port_text(netloc: str) -> str | None:
    """Return the port as written in ``netloc``, or None when absent or empty.

    `SplitResult.port` converts to `int` and rejects anything else; the text
    is compared as written instead.
    """
    hostport: str = netloc.rpartition("@")[2]
    if "]" in hostport:
        hostport = hostport.rpartition("]")[2]
    _, sep, port = hostport.rpartition(":")
    return port if sep and port else None


def parse_url(url: str) -> ParsedUrl:
    """Parse ``url`` into a [`ParsedUrl`][urlrel.url.ParsedUrl].

    Parsing is done with `urllib.parse.urlsplit`. References without
    ``scheme://`` (root-relative or relative paths) have no scheme, credentials,
    host or port; their path is kept as given.

    Args:
        url (str): The URL or URL reference to parse.

    Returns:
        ParsedUrl: The parsed parts.

    Raises:
        InvalidArgumentError: If ``url`` has a malformed authority (e.g. an
            unbalanced IPv6 bracket).
    """
    try:
        parts: SplitResult = urlsplit(url)
    except ValueError as exc:
        raise InvalidArgumentError(f'"{url}" is not a valid Url: {exc}') from exc

    prefix: str = parts.scheme + SCHEME_SEPARATOR
    if not parts.scheme or url[: len(prefix)].lower() != prefix:
        path, query = split_query(url)
        return ParsedUrl(
            scheme=None,
            netloc="",
            username=None,
            password=None,
            hostname=None,
            port=None,
            path=path,
            query=query,
        )

    # urlsplit lower-cases the scheme; the root keeps it as written
    _, query = split_query(url)
    parsed = ParsedUrl(
        scheme=url[: len(parts.scheme)],
        netloc=parts.netloc,
        username=parts.username,
        password=parts.password,
        hostname=parts.hostname,
        port=_port_text(parts.netloc),
        path=parts.path or SEPARATOR,
        query=query,
    )
    logger.trace("Parsed %r -> %r", url, parsed)
    return parsed


def split_url(url: str) -> tuple[str, str]:
    """Return ``(root, path)`` for ``url``, the path including its query.

    Examples:
        ```python
        split_url("ftp://user:pw@example.com:8080/a/b?x=1")
        # ("ftp://user:pw@example.com:8080", "/a/b?x=1")
        split_url("http://example.com")  # ("http://example.com", "/")
        ```
    """
    parsed: ParsedUrl = parse_url(url)
    return parsed.root, parsed.path + parsed.query


def is_absolute_url(value: object) -> bool:
    """Return True if ``value`` is a string with a scheme and a non-empty host."""
    if not isinstance(value, str):
        return False
    try:
        return parse_url(value).is_absolute
    except InvalidArgumentError:
        return False


def make_relative(url: str, base_url: str) -> str:
    """Make ``url`` relative to ``base_url``.

    ``base_url`` must be absolute; its path is treated as a directory. ``url``
    may be absolute (same root as ``base_url``), root-relative (``/...``),
    network-path (``//host/...``, takes the base scheme) or already relative.
    The query and fragment of ``url`` are re-appended verbatim.

    Args:
        url (str): The URL to make relative.
        base_url (str): The absolute base URL.

    Returns:
        str: The relative reference; ``""`` when ``url`` resolves to the base.

    Raises:
        InvalidArgumentError: If an argument is not a string, if ``base_url`` is
            not absolute, if ``url`` is malformed, or if the hosts of both URLs differ.
    """
    if not isinstance(url, str):
        raise InvalidArgumentError(f"The URL must be a string. Got: {type_name(url)}")
    if not isinstance(base_url, str):
        raise InvalidArgumentError(f"The base URL must be a string. Got: {type_name(base_url)}")

    if not is_absolute_url(base_url):
        raise InvalidArgumentError(f'"{base_url}" is not an absolute Url.')
    base: ParsedUrl = parse_url(base_url)

    if url.startswith(SEPARATOR * 2):
        url = f"{base.scheme}:{url}"

    target: ParsedUrl = parse_url(url)
    if target.has_authority and not target.same_origin(base):
        raise InvalidArgumentError(
            f'The URL "{target.root}" cannot be made relative to "{base.root}" '
            "since their host names are different."
        )

    relative: str = make_relative_path(target.path + target.query, base.path)
    logger.debug("make_relative(%r, %r) -> %r", url, base_url, relative)
    return relative
