# topmark:header:start
#
#   project      : NodeKeys
#   file         : json_nodes.py
#   file_relpath : src/nodekeys/io/json_nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON encoding of node trees.

Encoding:
    - JSON arrays decode to ``list``.
    - Objects tagged ``{"$$typeof": "element", "type": ..., "key": ..., "props": {...}}``
      decode to `Element`; ``props`` values are decoded recursively.
    - Objects tagged ``{"$$typeof": "portal", "children": ..., "container": ..., "key": ...}``
      decode to `Portal`.
    - Any other object stays a ``dict`` and is therefore an invalid child.
    - Scalars decode to themselves.

`encode_node` is the inverse used for machine-readable CLI output.
"""

from __future__ import annotations

import json
from typing import Any, Final

from nodekeys.config.logging import NodekeysLogger, get_logger
from nodekeys.core.errors import NodekeysError
from nodekeys.core.nodes import Element, Portal

logger: NodekeysLogger = get_logger(__name__)

TYPEOF_FIELD: Final[str] = "$$typeof"
ELEMENT_TAG: Final[str] = "element"
PORTAL_TAG: Final[str] = "portal"


class NodeDecodeError(NodekeysError, ValueError):
    """The input is not a valid JSON node tree."""


def decode_node(value: Any) -> Any:
    """Convert parsed JSON into a node tree."""
    if isinstance(value, list):
        return [decode_node(item) for item in value]
    if isinstance(value, dict):
        tag: Any = value.get(TYPEOF_FIELD)
        if tag == ELEMENT_TAG:
            props: Any = value.get("props") or {}
            if not isinstance(props, dict):
                raise NodeDecodeError(f"Element props must be an object (got {type(props).__name__})")
            return Element(
                type=value.get("type"),
                props={name: decode_node(prop) for name, prop in props.items()},
                key=value.get("key"),
            )
        if tag == PORTAL_TAG:
            return Portal(
                children=decode_node(value.get("children")),
                container=value.get("container"),
                key=value.get("key"),
            )
        if tag is not None:
            raise NodeDecodeError(f"Unknown {TYPEOF_FIELD} tag: {tag!r}")
    return value


def loads_nodes(text: str) -> Any:
    """Parse a JSON document into a node tree.

    Raises:
        NodeDecodeError: If ``text`` is not valid JSON or uses an unknown tag.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise NodeDecodeError(f"Invalid JSON: {e}") from e
    logger.debug("Decoded JSON document of type %s", type(data).__name__)
    return decode_node(data)


def encode_node(node: Any) -> Any:
    """Convert a node tree into JSON-compatible data."""
    if isinstance(node, Element):
        return {
            TYPEOF_FIELD: ELEMENT_TAG,
            "type": node.type,
            "key": node.key,
            "props": {name: encode_node(prop) for name, prop in node.props.items()},
        }
    if isinstance(node, Portal):
        return {
            TYPEOF_FIELD: PORTAL_TAG,
            "children": encode_node(node.children),
            "container": node.container,
            "key": node.key,
        }
    if isinstance(node, (list, tuple)):
        return [encode_node(item) for item in node]
    return node
