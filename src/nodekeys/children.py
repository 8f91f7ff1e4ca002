# topmark:header:start
#
#   project      : NodeKeys
#   file         : children.py
#   file_relpath : src/nodekeys/children.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public operations over children trees.

Usage:
    ```python
    from nodekeys import Element, children

    tree = [Element("li"), [Element("li", key="x"), "text"]]
    children.count(tree)            # 3
    [e.key for e in children.to_array(tree)[:2]]  # [".0", ".1:$x"]
    children.map(tree, lambda child, index: child)
    ```

Stable names: `map`, `for_each`, `count`, `only`, `to_array` (also available as
`map_children`, `for_each_child`, `count_children`, `only_child`, and as static
methods on `Children`).

All operations accept keyword-only ``config``, ``capabilities`` and
``diagnostics`` arguments which are forwarded to the `TreeFlattener`.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any, TypeVar

from nodekeys.config.logging import get_logger
from nodekeys.core.capabilities import DEFAULT_CAPABILITIES
from nodekeys.core.errors import OnlyChildError
from nodekeys.core.flatten import TreeFlattener
from nodekeys.core.nodes import Element
from nodekeys.core.paths import ROOT

if TYPE_CHECKING:
    from collections.abc import Callable

    from nodekeys.config.logging import NodekeysLogger
    from nodekeys.config.model import Config
    from nodekeys.core.capabilities import NodeCapabilities
    from nodekeys.diagnostic.types import DiagnosticSink

logger: NodekeysLogger = get_logger(__name__)

_T = TypeVar("_T")

_LEAF_PROBE: str = "nodekeys:leaf"


def map_children(
    children: Any,
    func: Callable[..., Any],
    context: object = None,
    *,
    config: Config | None = None,
    capabilities: NodeCapabilities | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> list[Any] | None:
    """Flatten ``children`` and map every leaf through ``func``.

    ``func(child, index)`` is called once per leaf, in depth-first order, with a
    running index. When ``context`` is not None it is bound as the first
    argument: ``func(context, child, index)``.

    Args:
        children: Children tree. ``None`` is returned unchanged.
        func: Map function.
        context: Optional receiver bound to ``func``.
        config: Runtime configuration.
        capabilities: Node capabilities.
        diagnostics: Diagnostic sink.

    Returns:
        list[Any] | None: The flat list of mapped results (re-keyed where they are
            elements or portals), or ``None`` if ``children`` is ``None``.

    Raises:
        InvalidChildError: If the tree contains an object that is not a valid child.
    """
    if children is None:
        return children

    bound: Callable[..., Any] = func if context is None else partial(func, context)
    counter: int = 0

    def _callback(child: Any) -> Any:
        nonlocal counter
        index: int = counter
        counter += 1
        return bound(child, index)

    flattener = TreeFlattener(config=config, capabilities=capabilities, diagnostics=diagnostics)
    result: list[Any] = []
    visited: int = flattener.flatten_into(children, result, ROOT, _callback)
    logger.trace("map_children: %d leaves -> %d results", visited, len(result))
    return result


def count_children(
    children: Any,
    *,
    config: Config | None = None,
    capabilities: NodeCapabilities | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> int:
    """Return the number of leaves in ``children``.

    Null leaves inside collections count, so ``count([None, "a"]) == 2`` while
    ``to_array([None, "a"]) == ["a"]``.
    """
    n: int = 0

    def _count(_child: Any, _index: int) -> None:
        nonlocal n
        n += 1

    map_children(
        children, _count, config=config, capabilities=capabilities, diagnostics=diagnostics
    )
    return n


def for_each_child(
    children: Any,
    func: Callable[..., Any],
    context: object = None,
    *,
    config: Config | None = None,
    capabilities: NodeCapabilities | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> None:
    """Call ``func(child, index)`` for every leaf; return values are ignored.

    ``context`` is bound the same way as in `map_children`.
    """
    bound: Callable[..., Any] = func if context is None else partial(func, context)

    def _visit(child: Any, index: int) -> None:
        bound(child, index)

    map_children(
        children, _visit, config=config, capabilities=capabilities, diagnostics=diagnostics
    )


def to_array(
    children: Any,
    *,
    config: Config | None = None,
    capabilities: NodeCapabilities | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> list[Any]:
    """Flatten ``children`` into a list with appropriately re-keyed elements.

    Returns:
        list[Any]: The flat list; ``[]`` when ``children`` is ``None``.
    """
    result: list[Any] | None = map_children(
        children,
        lambda child, _index: child,
        config=config,
        capabilities=capabilities,
        diagnostics=diagnostics,
    )
    return [] if result is None else result


def only_child(children: _T, *, capabilities: NodeCapabilities | None = None) -> _T:
    """Return ``children`` if it is a single element.

    Args:
        children: Children structure expected to be exactly one element.
        capabilities: Node capabilities used to recognize elements.

    Returns:
        The element, unchanged.

    Raises:
        OnlyChildError: If ``children`` is not a single valid element (a list,
            even of one element, is rejected).
    """
    caps: NodeCapabilities = capabilities if capabilities is not None else DEFAULT_CAPABILITIES
    if not caps.is_valid_element(children):
        raise OnlyChildError()
    return children


@dataclass(frozen=True, slots=True)
class KeyedLeaf:
    """A visited leaf together with the key the flattener assigned to its position."""

    key: str
    value: Any


def keyed_leaves(
    children: Any,
    *,
    config: Config | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> list[KeyedLeaf]:
    """Return every leaf of ``children`` with its key, null leaves included.

    Unlike `to_array`, primitives and ``None`` leaves are reported too, which
    makes this the tool for inspecting how a tree is keyed.
    """
    probes: list[Any] | None = map_children(
        children,
        lambda child, _index: Element(_LEAF_PROBE, {"value": child}),
        config=config,
        diagnostics=diagnostics,
    )
    if probes is None:
        return []
    return [KeyedLeaf(key=probe.key, value=probe.props["value"]) for probe in probes]


class Children:
    """Namespace exposing the public operations under their stable names."""

    map = staticmethod(map_children)
    for_each = staticmethod(for_each_child)
    count = staticmethod(count_children)
    only = staticmethod(only_child)
    to_array = staticmethod(to_array)


# Stable short names, used as ``children.map(...)`` etc.
map = map_children  # noqa: A001
for_each = for_each_child
count = count_children
only = only_child
