# topmark:header:start
#
#   project      : NodeKeys
#   file         : capabilities.py
#   file_relpath : src/nodekeys/core/capabilities.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Node capabilities consumed by the flattener.

The flattener never probes node types directly; it asks a `NodeCapabilities`
implementation. `DefaultCapabilities` understands the `Element` and `Portal`
types from `nodekeys.core.nodes` and Python's built-in containers. Hosts with
their own element types can pass a different implementation.
"""

from __future__ import annotations

import dataclasses
from collections.abc import ItemsView, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeVar

from nodekeys.core.nodes import Element, Portal

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

_N = TypeVar("_N")

# Key types whose ``str()`` form is unsurprising.
_SAFE_KEY_TYPES: tuple[type, ...] = (str, int, float)


@dataclass(frozen=True, slots=True)
class IterationCapability:
    """Handle returned for nodes that support pull-based iteration.

    Attributes:
        iterate: Zero-argument callable returning a fresh iterator over the node.
        map_entries: True when the iterator yields ``(key, value)`` entries of a
            mapping; such containers are flagged by a one-time warning.
    """

    iterate: Callable[[], Iterator[object]]
    map_entries: bool = False


class NodeCapabilities(Protocol):
    """Structural interface of the collaborators used by the flattener."""

    def is_valid_element(self, node: object) -> bool:
        """Return True if ``node`` is an element."""
        ...

    def is_portal(self, node: object) -> bool:
        """Return True if ``node`` is a portal."""
        ...

    def is_sequence(self, node: object) -> bool:
        """Return True if ``node`` is an ordered, indexable sequence of children."""
        ...

    def get_iteration_capability(self, node: object) -> IterationCapability | None:
        """Return an iteration handle for ``node``, or None if it is not iterable."""
        ...

    def get_key(self, node: object) -> object | None:
        """Return the explicit key carried by ``node``, or None."""
        ...

    def clone_with_new_key(self, node: _N, key: str) -> _N:
        """Return a copy of ``node`` with its key replaced; ``node`` is unchanged."""
        ...

    def check_string_coercion_safety(self, value: object) -> str | None:
        """Return a diagnostic message if ``str(value)`` is a surprising key, else None."""
        ...


class DefaultCapabilities:
    """Capabilities for `Element`/`Portal` nodes and built-in containers."""

    def is_valid_element(self, node: object) -> bool:
        """Return True if ``node`` is an `Element`."""
        return isinstance(node, Element)

    def is_portal(self, node: object) -> bool:
        """Return True if ``node`` is a `Portal`."""
        return isinstance(node, Portal)

    def is_sequence(self, node: object) -> bool:
        """Return True for ``list`` and ``tuple``."""
        return isinstance(node, (list, tuple))

    def get_iteration_capability(self, node: object) -> IterationCapability | None:
        """Return an iteration handle for iterable non-string, non-mapping nodes."""
        if isinstance(node, (str, bytes, bytearray, Mapping)):
            return None
        if isinstance(node, ItemsView):
            entries: ItemsView[object, object] = node
            return IterationCapability(iterate=lambda: iter(entries), map_entries=True)
        if isinstance(node, Iterable):
            iterable: Iterable[object] = node
            return IterationCapability(iterate=lambda: iter(iterable))
        return None

    def get_key(self, node: object) -> object | None:
        """Return ``node.key`` when present."""
        return getattr(node, "key", None)

    def clone_with_new_key(self, node: _N, key: str) -> _N:
        """Return a dataclass copy of ``node`` with ``key`` replaced."""
        if not dataclasses.is_dataclass(node) or isinstance(node, type):
            raise TypeError(f"Cannot re-key {type(node).__name__!r}: not a dataclass instance")
        return dataclasses.replace(node, key=key)  # type: ignore[type-var]

    def check_string_coercion_safety(self, value: object) -> str | None:
        """Flag keys that are not ``str``, ``int`` or ``float`` (``bool`` included)."""
        if isinstance(value, _SAFE_KEY_TYPES) and not isinstance(value, bool):
            return None
        return (
            f"The provided key is an unsupported type {type(value).__name__!r}. "
            "It is coerced with str() before being used as a key."
        )


DEFAULT_CAPABILITIES: DefaultCapabilities = DefaultCapabilities()
