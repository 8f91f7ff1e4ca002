# topmark:header:start
#
#   project      : NodeKeys
#   file         : test_flatten_properties.py
#   file_relpath : tests/core/test_flatten_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the flattener over generated children trees.

Asserts that:
1) the recursive and iterative strategies agree on results, keys and callback order,
2) counts and collected leaves match an independent walk of the tree,
3) positional keys are unique and follow the path grammar,
4) a lone leaf keeps its key when wrapped in a one-item list.
"""

from __future__ import annotations

import re
from typing import Any

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from nodekeys.children import count_children, keyed_leaves, map_children, to_array
from nodekeys.config.model import FlattenStrategy
from nodekeys.core.escaping import escape, escape_user_provided_key
from tests.conftest import make_config
from tests.strategies_nodekeys import (
    reference_leaves,
    s_element,
    s_portal,
    s_positional_tree,
    s_primitive,
    s_tree,
)

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

RECURSIVE = make_config(strategy=FlattenStrategy.RECURSIVE)
ITERATIVE = make_config(strategy=FlattenStrategy.ITERATIVE)

POSITIONAL_KEY = re.compile(r"^\.[0-9a-z]+(:[0-9a-z]+)*$")

SETTINGS = settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=80)


@SETTINGS
@given(tree=s_tree)
def test_strategies_agree(tree: Any) -> None:
    """Both strategies produce the same output, keys and callback sequence."""
    calls_rec: list[tuple[Any, int]] = []
    calls_it: list[tuple[Any, int]] = []

    def _rec(child: Any, index: int) -> Any:
        calls_rec.append((child, index))
        return child

    def _it(child: Any, index: int) -> Any:
        calls_it.append((child, index))
        return child

    assert map_children(tree, _rec, config=RECURSIVE) == map_children(tree, _it, config=ITERATIVE)
    assert calls_rec == calls_it
    assert keyed_leaves(tree, config=RECURSIVE) == keyed_leaves(tree, config=ITERATIVE)
    assert count_children(tree, config=RECURSIVE) == count_children(tree, config=ITERATIVE)


@SETTINGS
@given(tree=s_tree)
def test_strategies_agree_on_expansions(tree: Any) -> None:
    """Expanding every leaf into a list keys identically under both strategies."""

    def _expand(child: Any, _index: int) -> Any:
        return [child, [child]]

    assert map_children(tree, _expand, config=RECURSIVE) == map_children(
        tree, _expand, config=ITERATIVE
    )


@SETTINGS
@given(tree=s_tree)
def test_count_and_collected_leaves_match_reference(tree: Any) -> None:
    """`count` counts every leaf; `to_array` keeps the non-null ones."""
    expected: list[Any] = [] if tree is None else reference_leaves(tree)

    assert count_children(tree) == len(expected)
    assert len(to_array(tree)) == sum(1 for leaf in expected if leaf is not None)
    assert [leaf.value for leaf in keyed_leaves(tree)] == expected


@SETTINGS
@given(tree=s_positional_tree)
def test_positional_keys_are_unique_and_well_formed(tree: Any) -> None:
    """Without explicit keys, every leaf gets a distinct grammar-conforming key."""
    keys: list[str] = [element.key for element in to_array(tree)]

    assert len(set(keys)) == len(keys)
    assert all(POSITIONAL_KEY.match(key) for key in keys)


@SETTINGS
@given(leaf=st.one_of(s_primitive, s_element, s_portal))
def test_wrapping_a_leaf_keeps_its_key(leaf: Any) -> None:
    """A lone leaf and ``[leaf]`` are keyed identically."""
    assert keyed_leaves(leaf)[0].key == keyed_leaves([leaf])[0].key


@given(text=st.text(alphabet="ab/=:", max_size=12))
def test_escaping_contracts(text: str) -> None:
    """Escaped segments hold no ``:``; dropping one slash per run restores the text."""
    assert ":" not in escape(text)
    assert escape(text).startswith("$")
    assert re.sub(r"/(/*)", r"\1", escape_user_provided_key(text)) == text
