# topmark:header:start
#
#   project      : UrlRel
#   file         : paths.py
#   file_relpath : src/urlrel/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure helpers for URL path canonicalization and relativization.

These utilities operate on the *path* part of a URL only (no scheme, no
authority). They do **no I/O** and keep no state, which makes them safe to
use from any thread and easy to exercise in isolation.

Key behaviors:
    - ``split_query(path)``: separate the path from its ``?query`` / ``#fragment``
      tail, which is carried through verbatim.
    - ``canonicalize(path)``: resolve ``.`` and ``..`` segments and collapse
      doubled slashes.
    - ``common_prefix_length(a, b)``: number of leading segments shared by two
      segment lists.
    - ``render_relative(...)``: build the ``../`` climbs plus remaining segments.
    - ``make_relative_path(path, base_path)``: combine the above.

Policy recap:
    * A rooted path (leading ``/``) can never climb above its root: leading
      ``..`` segments are dropped.
    * A relative path keeps leading ``..`` segments since its anchor is unknown.
    * The base path is always treated as a directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from urlrel.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from urlrel.config.logging import UrlrelLogger

logger: UrlrelLogger = get_logger(__name__)

SEPARATOR: Final[str] = "/"
CURRENT_DIR: Final[str] = "."
PARENT_DIR: Final[str] = ".."

# Characters that start the part of a URL carried through untouched.
_TAIL_MARKERS: Final[tuple[str, ...]] = ("?", "#")


def split_query(path: str) -> tuple[str, str]:
    """Split ``path`` at the first ``?`` or ``#``.

    Args:
        path (str): A URL path, possibly followed by a query and/or fragment.

    Returns:
        tuple[str, str]: ``(path, tail)`` where ``tail`` keeps its leading marker
            (``?`` or ``#``), or is empty when there is none.
    """
    cut: int = len(path)
    for marker in _TAIL_MARKERS:
        pos: int = path.find(marker)
        if pos != -1 and pos < cut:
            cut = pos
    return path[:cut], path[cut:]


def split_root(path: str) -> tuple[str, str]:
    """Split ``path`` into its root (``"/"`` or ``""``) and the remainder."""
    if path.startswith(SEPARATOR):
        return SEPARATOR, path.lstrip(SEPARATOR)
    return "", path


def canonical_segments(path: str) -> list[str]:
    """Return the canonical segment list of ``path`` (root not included).

    Args:
        path (str): A URL path without query.

    Returns:
        list[str]: Segments with ``.``, empty segments and cancelled ``..``
            removed. Leading ``..`` segments survive only for relative paths.
    """
    root, rest = split_root(path)
    parts: list[str] = []
    for part in rest.split(SEPARATOR):
        if part in ("", CURRENT_DIR):
            continue
        if part == PARENT_DIR and parts and parts[-1] != PARENT_DIR:
            parts.pop()
            continue
        # A rooted path cannot climb above its root
        if part != PARENT_DIR or not root:
            parts.append(part)
    return parts


def canonicalize(path: str) -> str:
    """Resolve dot-segments and doubled slashes in ``path``.

    Trailing slashes are not kept. The query, if any, must have been split off
    with `split_query` first.

    Examples:
        ```python
        canonicalize("/webmozart/puli/../css/./style.css")  # "/webmozart/css/style.css"
        canonicalize("css//style.css")  # "css/style.css"
        canonicalize("../../style.css")  # "../../style.css"
        ```

    Args:
        path (str): Path to canonicalize.

    Returns:
        str: The canonical path; ``""`` for the empty path.
    """
    if not path:
        return ""
    root, _ = split_root(path)
    return root + SEPARATOR.join(canonical_segments(path))


def common_prefix_length(parts: Sequence[str], base_parts: Sequence[str]) -> int:
    """Return the number of leading segments shared by both sequences (case-sensitive)."""
    count: int = 0
    for part, base_part in zip(parts, base_parts):
        if part != base_part:
            break
        count += 1
    return count


def render_relative(parts: Sequence[str], base_parts: Sequence[str], shared: int) -> str:
    """Render the relative reference from ``base_parts`` to ``parts``.

    Args:
        parts (Sequence[str]): Canonical target segments.
        base_parts (Sequence[str]): Canonical base segments (a directory).
        shared (int): Length of the common prefix of both sequences.

    Returns:
        str: One ``../`` per unshared base segment, followed by the unshared
            target segments joined by ``/``.
    """
    climbs: str = (PARENT_DIR + SEPARATOR) * (len(base_parts) - shared)
    return (climbs + SEPARATOR.join(parts[shared:])).rstrip(SEPARATOR)


def _names_directory(path: str) -> bool:
    """Whether ``path`` ends in ``/`` or in a final ``.`` or ``..`` segment."""
    return path.endswith(SEPARATOR) or path.rpartition(SEPARATOR)[2] in (CURRENT_DIR, PARENT_DIR)


def _keep_trailing_slash(path: str, relative: str) -> str:
    if relative and _names_directory(path) and not relative.endswith(SEPARATOR):
        return relative + SEPARATOR
    return relative


def make_relative_path(path: str, base_path: str) -> str:
    """Make ``path`` relative to the directory ``base_path``.

    Both arguments are paths without scheme or authority; only ``path`` may
    carry a query, which is re-appended verbatim. A trailing ``/`` on ``path``
    is kept on a non-empty result so directory references stay directories; a
    final ``.`` or ``..`` segment names a directory too.

    Args:
        path (str): Target path, rooted or already relative.
        base_path (str): Base directory path, normally rooted.

    Returns:
        str: The relative reference, ``""`` when both resolve to the same path.
    """
    path, tail = split_query(path)
    base_path, _ = split_query(base_path)

    root, _ = split_root(path)
    base_root, _ = split_root(base_path)
    parts: list[str] = canonical_segments(path)
    base_parts: list[str] = canonical_segments(base_path)

    if not root and base_root:
        # Already relative: it is taken as relative to the base directory.
        if not base_parts:
            # Nothing to climb out of at the root
            while parts and parts[0] == PARENT_DIR:
                parts.pop(0)
        relative: str = _keep_trailing_slash(path, SEPARATOR.join(parts))
        logger.trace("Path %r is already relative to %r: %r", path, base_path, relative)
        return relative + tail

    shared: int = common_prefix_length(parts, base_parts)
    relative = _keep_trailing_slash(path, render_relative(parts, base_parts, shared))
    logger.trace(
        "Relativized %r against %r: shared=%d climbs=%d -> %r",
        path,
        base_path,
        shared,
        len(base_parts) - shared,
        relative,
    )
    return relative + tail
