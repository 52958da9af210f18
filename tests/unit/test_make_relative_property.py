# topmark:header:start
#
#   project      : UrlRel
#   file         : test_make_relative_property.py
#   file_relpath : tests/unit/test_make_relative_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for `make_relative`.

Covers identity, prefix stripping, dot-segment invariance, query preservation
and host mismatch rejection over generated paths.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tests.strategies_urlrel import (
    join_path,
    s_host,
    s_noisy_segments,
    s_query,
    s_segment,
    s_segments,
)
from urlrel import InvalidArgumentError, make_relative
from urlrel.paths import canonicalize


@given(host=s_host(), segments=s_segments())
def test_url_relative_to_itself_is_empty(host: str, segments: list[str]) -> None:
    """make_relative(X, X) == ''."""
    url = host + join_path(segments)
    assert make_relative(url, url) == ""


@given(host=s_host(), base=s_segments(), suffix=s_segments(min_size=1))
def test_prefix_is_stripped(host: str, base: list[str], suffix: list[str]) -> None:
    """A URL below the base is the suffix itself."""
    base_url = host + join_path(base)
    url = host + join_path(base + suffix)
    assert make_relative(url, base_url) == "/".join(suffix)


@given(
    data=st.data(),
    host=s_host(),
    target=s_segments(min_size=1),
    base=s_segments(min_size=1),
)
def test_dot_segment_noise_is_ignored(
    data: st.DataObject, host: str, target: list[str], base: list[str]
) -> None:
    """Inserting `./` or `x/../` does not change the result."""
    noisy: list[str] = data.draw(s_noisy_segments(target))
    base_url = host + join_path(base)
    assert make_relative(host + join_path(noisy), base_url) == make_relative(
        host + join_path(target), base_url
    )
    assert canonicalize(join_path(noisy)) == join_path(target)


@given(host=s_host(), target=s_segments(), base=s_segments(), query=s_query())
def test_query_is_preserved(host: str, target: list[str], base: list[str], query: str) -> None:
    """The query is appended verbatim after the relative path."""
    base_url = host + join_path(base)
    plain = make_relative(host + join_path(target), base_url)
    assert make_relative(host + join_path(target) + query, base_url) == plain + query


@given(target=s_segments(), base=s_segments())
def test_root_relative_matches_absolute(target: list[str], base: list[str]) -> None:
    """A root-relative URL behaves like the absolute URL on the base host."""
    host = "http://example.com"
    base_url = host + join_path(base)
    assert make_relative(join_path(target), base_url) == make_relative(
        host + join_path(target), base_url
    )


@pytest.mark.hypothesis_slow
@settings(max_examples=200, deadline=None)
@given(
    target=s_segments(),
    base=s_segments(),
    hosts=st.lists(s_host(), min_size=2, max_size=2, unique=True),
)
def test_host_mismatch_is_rejected(target: list[str], base: list[str], hosts: list[str]) -> None:
    """Different roots always fail, however similar the paths."""
    url_host, base_host = hosts
    with pytest.raises(InvalidArgumentError, match="since their host names are different"):
        make_relative(url_host + join_path(target), base_host + join_path(base))


@given(value=st.one_of(st.none(), st.integers(), st.lists(st.text()), st.binary()))
def test_non_string_arguments_are_rejected(value: object) -> None:
    """Type validation runs before parsing, for either argument."""
    with pytest.raises(InvalidArgumentError, match="^The URL must be a string"):
        make_relative(value, "http://example.com/")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError, match="^The base URL must be a string"):
        make_relative("/a", value)  # type: ignore[arg-type]


@given(
    host=s_host(),
    target=s_segments(min_size=1),
    base=s_segments(),
    detour=s_segment(),
)
def test_final_dot_segment_names_a_directory(
    host: str, target: list[str], base: list[str], detour: str
) -> None:
    """`a/x/..` and `a/.` point at the same directory as `a/`."""
    base_url = host + join_path(base)
    expected = make_relative(host + join_path(target) + "/", base_url)
    assert make_relative(host + join_path([*target, detour, ".."]), base_url) == expected
    assert make_relative(host + join_path([*target, "."]), base_url) == expected
