# topmark:header:start
#
#   project      : NodeKeys
#   file         : test_json_nodes.py
#   file_relpath : tests/io/test_json_nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the JSON node encoding."""

from __future__ import annotations

import pytest

from nodekeys.core.nodes import Element, Portal
from nodekeys.io.json_nodes import (
    NodeDecodeError,
    decode_node,
    encode_node,
    loads_nodes,
)


def test_loads_plain_values() -> None:
    """Lists, primitives and null map to Python values."""
    assert loads_nodes('["a", 1, 2.5, null, true, [false]]') == ["a", 1, 2.5, None, True, [False]]


def test_loads_element() -> None:
    """Tagged objects become elements; props are decoded recursively."""
    tree = loads_nodes(
        '[{"$$typeof": "element", "type": "li", "key": "x",'
        ' "props": {"children": [{"$$typeof": "element", "type": "b"}]}}]'
    )
    assert tree == [Element("li", {"children": [Element("b")]}, key="x")]


def test_loads_portal() -> None:
    """Portal children are decoded but left nested."""
    tree = loads_nodes('{"$$typeof": "portal", "children": ["a"], "container": "#root"}')
    assert tree == Portal(children=["a"], container="#root")


def test_untagged_objects_stay_dicts() -> None:
    """Objects without a tag are kept as mappings (invalid children later)."""
    assert decode_node({"foo": 1}) == {"foo": 1}


def test_unknown_tag() -> None:
    """Unknown tags are rejected."""
    with pytest.raises(NodeDecodeError, match="Unknown \\$\\$typeof tag: 'fragment'"):
        decode_node({"$$typeof": "fragment"})


def test_bad_props() -> None:
    """Element props must be an object."""
    with pytest.raises(NodeDecodeError, match="props must be an object"):
        decode_node({"$$typeof": "element", "type": "li", "props": [1]})


def test_invalid_json() -> None:
    """Malformed JSON raises `NodeDecodeError`, which is a `ValueError`."""
    with pytest.raises(ValueError, match="Invalid JSON"):
        loads_nodes("[1,")


def test_encode_nodes() -> None:
    """Elements and portals encode to tagged objects; tuples become lists."""
    encoded = encode_node(
        (Element("li", {"title": "t"}, key=".0"), Portal(children=("a",), key=".1"), None)
    )
    assert encoded == [
        {"$$typeof": "element", "type": "li", "key": ".0", "props": {"title": "t"}},
        {"$$typeof": "portal", "children": ["a"], "container": None, "key": ".1"},
        None,
    ]


def test_decode_accepts_encoded_elements() -> None:
    """Encoded elements decode to equal elements."""
    element = Element("li", {"children": [Element("b", key="k")]}, key="x")
    assert decode_node(encode_node(element)) == element
