# topmark:header:start
#
#   project      : NodeKeys
#   file         : test_paths.py
#   file_relpath : tests/core/test_paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `PathState`."""

from __future__ import annotations

from nodekeys.core.paths import ROOT, PathState


def test_root_state() -> None:
    """The root state has neither prefix nor name."""
    assert ROOT.is_root
    assert ROOT.escaped_prefix == ""
    assert ROOT.name_so_far == ""


def test_descend_uses_dot_then_colon() -> None:
    """The first level joins with ``.``, deeper levels with ``:``."""
    first = ROOT.descend("1")
    assert first.name_so_far == ".1"
    assert not first.is_root
    assert first.descend("$x").descend("0").name_so_far == ".1:$x:0"


def test_descend_keeps_prefix() -> None:
    """Descending never changes the caller-renaming prefix."""
    state = PathState("k/", "")
    assert state.descend("0") == PathState("k/", ".0")


def test_leaf_name_at_root_uses_own_segment() -> None:
    """A lone leaf is named like the first item of a one-item list."""
    assert ROOT.leaf_name(lambda: "0") == ".0"
    assert ROOT.leaf_name(lambda: "$x") == ".$x"


def test_leaf_name_below_root_ignores_own_segment() -> None:
    """Below the root the accumulated name is the leaf name."""
    calls: list[str] = []

    def _segment() -> str:
        calls.append("called")
        return "zzz"

    assert ROOT.descend("2").leaf_name(_segment) == ".2"
    assert calls == []


def test_expansion_of_escapes_slashes() -> None:
    """An expansion is rooted under the escaped leaf name plus ``/``."""
    assert PathState.expansion_of(".0") == PathState(".0/", "")
    assert PathState.expansion_of(".$a/b") == PathState(".$a//b/", "")
