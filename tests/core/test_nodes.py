# topmark:header:start
#
#   project      : NodeKeys
#   file         : test_nodes.py
#   file_relpath : tests/core/test_nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for node classification and the default capabilities."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

import pytest

from nodekeys.core.capabilities import DEFAULT_CAPABILITIES, DefaultCapabilities
from nodekeys.core.nodes import Element, NodeKind, Portal, classify
from tests.conftest import parametrize


@parametrize(
    "node, kind",
    [
        (None, NodeKind.NULL),
        (True, NodeKind.NULL),
        (False, NodeKind.NULL),
        ("", NodeKind.PRIMITIVE),
        ("text", NodeKind.PRIMITIVE),
        (0, NodeKind.PRIMITIVE),
        (1.5, NodeKind.PRIMITIVE),
        (Element("li"), NodeKind.ELEMENT),
        (Portal(), NodeKind.PORTAL),
        ([], NodeKind.SEQUENCE),
        ((1, 2), NodeKind.SEQUENCE),
        (range(3), NodeKind.ITERABLE),
        (deque([1]), NodeKind.ITERABLE),
        ({"a": 1}.items(), NodeKind.ITERABLE),
        ({"a": 1}, NodeKind.OPAQUE),
        (b"bytes", NodeKind.OPAQUE),
        (object(), NodeKind.OPAQUE),
    ],
)
def test_classify(node: object, kind: NodeKind) -> None:
    """Every value maps onto exactly one kind."""
    assert classify(node, DEFAULT_CAPABILITIES) is kind


def test_generator_is_iterable() -> None:
    """Generators are iterable branches."""
    assert classify((x for x in "ab"), DEFAULT_CAPABILITIES) is NodeKind.ITERABLE


def test_leaf_kinds() -> None:
    """Null, primitives, elements and portals terminate the descent."""
    leaves = {kind for kind in NodeKind if kind.is_leaf}
    assert leaves == {NodeKind.NULL, NodeKind.PRIMITIVE, NodeKind.ELEMENT, NodeKind.PORTAL}


def test_items_view_is_flagged_as_map_entries() -> None:
    """Mapping item views iterate as entries and are flagged."""
    capability = DEFAULT_CAPABILITIES.get_iteration_capability({"a": 1}.items())
    assert capability is not None
    assert capability.map_entries
    assert list(capability.iterate()) == [("a", 1)]


def test_iteration_capability_returns_fresh_iterators() -> None:
    """Each call to ``iterate`` starts over."""
    capability = DEFAULT_CAPABILITIES.get_iteration_capability(range(2))
    assert capability is not None
    assert not capability.map_entries
    assert list(capability.iterate()) == [0, 1]
    assert list(capability.iterate()) == [0, 1]


def test_clone_with_new_key_does_not_mutate() -> None:
    """Re-keying returns a copy with every other field intact."""
    original = Element("li", {"id": 1}, key="a")
    clone = DEFAULT_CAPABILITIES.clone_with_new_key(original, ".0")

    assert clone == Element("li", {"id": 1}, key=".0")
    assert original.key == "a"


def test_clone_with_new_key_rejects_non_dataclasses() -> None:
    """Only dataclass nodes can be re-keyed by the default capabilities."""

    class Custom:
        key = None

    with pytest.raises(TypeError, match="Custom"):
        DEFAULT_CAPABILITIES.clone_with_new_key(Custom(), ".0")


@parametrize("value", ["k", 0, 1.5])
def test_coercion_safe_types(value: object) -> None:
    """Strings and numbers stringify without surprises."""
    assert DEFAULT_CAPABILITIES.check_string_coercion_safety(value) is None


@parametrize("value", [True, None, ("a",), object()])
def test_coercion_unsafe_types(value: object) -> None:
    """Other key types produce a message naming the type."""
    message = DEFAULT_CAPABILITIES.check_string_coercion_safety(value)
    assert message is not None
    assert type(value).__name__ in message


def test_custom_capabilities_change_classification() -> None:
    """Hosts can recognize their own sequence and element types."""

    @dataclass(frozen=True)
    class Widget:
        name: str
        key: object = None

    class HostCapabilities(DefaultCapabilities):
        def is_valid_element(self, node: object) -> bool:
            return isinstance(node, (Element, Widget))

        def is_sequence(self, node: object) -> bool:
            return isinstance(node, (list, tuple, deque))

    caps = HostCapabilities()
    assert classify(deque(), caps) is NodeKind.SEQUENCE
    assert classify(Widget("w"), caps) is NodeKind.ELEMENT
    assert classify(Widget("w"), DEFAULT_CAPABILITIES) is NodeKind.OPAQUE
