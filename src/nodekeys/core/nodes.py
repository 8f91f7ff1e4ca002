# topmark:header:start
#
#   project      : NodeKeys
#   file         : nodes.py
#   file_relpath : src/nodekeys/core/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Node model and structural classification.

A *node* is any Python value found in a children tree. `classify` maps it onto
exactly one `NodeKind`; the flattener dispatches on that kind only.

Value mapping:
    - ``None`` and any ``bool`` are Null.
    - ``str``, ``int`` and ``float`` are Primitive (``bool`` is checked first).
    - `Element` and `Portal` instances are leaves carrying an optional key.
    - ``list`` and ``tuple`` are Sequences.
    - Other iterables (generators, ``range``, sets, ``dict.items()`` views...)
      are Iterables. ``str``, ``bytes`` and mappings are not.
    - Everything else, including ``dict``, is Opaque and invalid as a child.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from nodekeys.core.capabilities import NodeCapabilities


@dataclass(frozen=True)
class Element:
    """An opaque, identifiable leaf.

    Attributes:
        type: Element type (a tag name, a component, anything).
        props: Element properties; never inspected by the flattener.
        key: Optional explicit key. Re-keying produces a copy, never mutates.
    """

    type: Any
    props: Mapping[str, Any] = field(default_factory=lambda: {})
    key: Any = None


@dataclass(frozen=True)
class Portal:
    """A leaf that forwards its children to another container.

    Attributes:
        children: The portal's own children (not flattened by the parent pass).
        container: Target container handle.
        key: Optional explicit key.
    """

    children: Any = None
    container: Any = None
    key: Any = None


class NodeKind(Enum):
    """Structural kinds a node can take."""

    NULL = "null"
    PRIMITIVE = "primitive"
    ELEMENT = "element"
    PORTAL = "portal"
    SEQUENCE = "sequence"
    ITERABLE = "iterable"
    OPAQUE = "opaque"

    @property
    def is_leaf(self) -> bool:
        """Return True for kinds that terminate the descent."""
        return self in _LEAF_KINDS


_LEAF_KINDS: frozenset[NodeKind] = frozenset(
    {NodeKind.NULL, NodeKind.PRIMITIVE, NodeKind.ELEMENT, NodeKind.PORTAL}
)


def classify(node: object, capabilities: NodeCapabilities) -> NodeKind:
    """Return the structural kind of ``node``.

    Args:
        node: Any value found in a children tree.
        capabilities: Collaborator used to recognize elements, portals,
            sequences and iterables.

    Returns:
        NodeKind: The kind; checks run in a fixed order so the result is unique.
    """
    if node is None or isinstance(node, bool):
        return NodeKind.NULL
    if isinstance(node, (str, int, float)):
        return NodeKind.PRIMITIVE
    if capabilities.is_valid_element(node):
        return NodeKind.ELEMENT
    if capabilities.is_portal(node):
        return NodeKind.PORTAL
    if capabilities.is_sequence(node):
        return NodeKind.SEQUENCE
    if capabilities.get_iteration_capability(node) is not None:
        return NodeKind.ITERABLE
    return NodeKind.OPAQUE
