# topmark:header:start
#
#   project      : NodeKeys
#   file         : test_escaping.py
#   file_relpath : tests/core/test_escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the key escaping helpers."""

from __future__ import annotations

import pytest

from nodekeys.core.escaping import escape, escape_user_provided_key, to_base36
from tests.conftest import parametrize


@parametrize(
    "key, expected",
    [
        ("a=b:c", "$a=0b=2c"),
        ("", "$"),
        ("plain", "$plain"),
        ("==", "$=0=0"),
        ("=0", "$=00"),
        ("a/b.c$", "$a/b.c$"),
    ],
)
def test_escape(key: str, expected: str) -> None:
    """`escape` substitutes reserved characters and prefixes ``$``."""
    assert escape(key) == expected


@parametrize(
    "text, expected",
    [
        ("a/b", "a//b"),
        ("a//b", "a///b"),
        ("/", "//"),
        ("/a/", "//a//"),
        ("no-slash", "no-slash"),
        ("", ""),
        ("a/b//c///", "a//b///c////"),
    ],
)
def test_escape_user_provided_key_doubles_every_slash_run(text: str, expected: str) -> None:
    """Each maximal run of ``/`` gains exactly one extra ``/``."""
    assert escape_user_provided_key(text) == expected


@parametrize(
    "index, expected",
    [(0, "0"), (9, "9"), (10, "a"), (35, "z"), (36, "10"), (1295, "zz"), (1296, "100")],
)
def test_to_base36(index: int, expected: str) -> None:
    """Indexes render as lowercase base-36 digits."""
    assert to_base36(index) == expected


def test_to_base36_matches_int_parse() -> None:
    """`to_base36` is the inverse of ``int(s, 36)``."""
    for index in range(0, 5000, 7):
        assert int(to_base36(index), 36) == index


def test_to_base36_rejects_negative() -> None:
    """Negative indexes are a programming error."""
    with pytest.raises(ValueError, match="index must be >= 0"):
        to_base36(-1)
