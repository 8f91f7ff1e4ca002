# topmark:header:start
#
#   project      : NodeKeys
#   file         : flatten.py
#   file_relpath : src/nodekeys/core/flatten.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Flatten a children tree into an accumulator, keying every leaf by its path.

The walk is depth-first and left-to-right. Each leaf is handed to a callback;
its result is appended to the accumulator:

* a list/tuple result is flattened in place with the identity callback, under a
  caller-renaming prefix derived from the leaf's own key;
* an element or portal result is cloned with its path-derived key;
* ``None`` contributes nothing, but the leaf still counts as visited;
* anything else is appended unchanged.

Two strategies walk the tree. `FlattenStrategy.RECURSIVE` recurses directly;
`FlattenStrategy.ITERATIVE` keeps an explicit stack of frames and advances
iterators lazily, so deep trees do not hit the interpreter recursion limit.
Both produce the same keys, order, counts and callback sequence.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from nodekeys.config.logging import get_logger
from nodekeys.config.model import Config, FlattenStrategy
from nodekeys.constants import USER_KEY_DELIMITER
from nodekeys.core.capabilities import DEFAULT_CAPABILITIES
from nodekeys.core.derive import check_key_coercion, derive_key
from nodekeys.core.errors import InvalidChildError
from nodekeys.core.escaping import escape_user_provided_key
from nodekeys.core.nodes import NodeKind, classify
from nodekeys.core.paths import ROOT, PathState
from nodekeys.diagnostic.model import DiagnosticCode, NullDiagnosticSink

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from nodekeys.config.logging import NodekeysLogger
    from nodekeys.core.capabilities import IterationCapability, NodeCapabilities
    from nodekeys.diagnostic.types import DiagnosticSink

    MapCallback = Callable[[Any], Any]

logger: NodekeysLogger = get_logger(__name__)

MAPS_AS_CHILDREN_MESSAGE: Final[str] = (
    "Using mapping items as children is not supported. "
    "Use a list of keyed elements instead."
)

_EXHAUSTED: Final[object] = object()


def _identity(child: Any) -> Any:
    return child


def describe_invalid_child(node: object) -> str:
    """Describe an invalid child for error messages.

    Mappings and plain objects (default ``repr``) list their keys; anything else
    falls back to ``str(node)``.
    """
    if isinstance(node, Mapping):
        keys: Mapping[object, object] = node
        return "object with keys {" + ", ".join(str(k) for k in keys) + "}"
    if type(node).__repr__ is object.__repr__ and hasattr(node, "__dict__"):
        return "object with keys {" + ", ".join(vars(node)) + "}"
    return str(node)


@dataclass(slots=True)
class _NodeFrame:
    node: object
    state: PathState
    callback: MapCallback
    counted: bool


@dataclass(slots=True)
class _BranchFrame:
    children: Iterator[object]
    state: PathState
    callback: MapCallback
    counted: bool
    index: int = 0


class TreeFlattener:
    """Depth-first flattening engine.

    A flattener is cheap to build and holds no per-pass state besides what the
    caller passes to `flatten_into`; the accumulator belongs to the caller.

    Args:
        config: Runtime configuration (strategy, dev checks). Defaults to
            `Config.from_defaults()`.
        capabilities: Collaborator for element/portal/sequence/iterable
            recognition and re-keying.
        diagnostics: Sink for non-fatal diagnostics. Defaults to a
            `NullDiagnosticSink`.
    """

    def __init__(
        self,
        *,
        config: Config | None = None,
        capabilities: NodeCapabilities | None = None,
        diagnostics: DiagnosticSink | None = None,
    ) -> None:
        self.config: Config = config if config is not None else Config.from_defaults()
        self.capabilities: NodeCapabilities = (
            capabilities if capabilities is not None else DEFAULT_CAPABILITIES
        )
        self.diagnostics: DiagnosticSink = (
            diagnostics if diagnostics is not None else NullDiagnosticSink()
        )

    # ------------------------------ entry point ------------------------------

    def flatten_into(
        self,
        children: object,
        accumulator: list[Any],
        state: PathState,
        callback: MapCallback,
    ) -> int:
        """Flatten ``children`` into ``accumulator``.

        Args:
            children: The tree to flatten.
            accumulator: Output list; mapped leaves are appended in order.
            state: Path state of ``children``; `ROOT` for a top-level call.
            callback: Called once per leaf with the leaf (``bool`` leaves are
                passed as ``None``).

        Returns:
            int: Number of leaves visited in ``children``. Leaves produced by
                expanding a callback's list result are not counted.

        Raises:
            InvalidChildError: If a node is neither a leaf, a sequence nor an iterable.
        """
        logger.debug(
            "Flattening %s with %s strategy", type(children).__name__, self.config.strategy.value
        )
        if self.config.strategy is FlattenStrategy.ITERATIVE:
            return self._walk_iterative(children, accumulator, state, callback)
        return self._walk_recursive(children, accumulator, state, callback)

    # -------------------------------- helpers --------------------------------

    def derive_key(self, node: object, index: int) -> str:
        """Return the key segment of ``node`` at ``index`` using this flattener's settings."""
        return derive_key(
            node,
            index,
            capabilities=self.capabilities,
            dev_checks=self.config.dev_checks,
            diagnostics=self.diagnostics,
        )

    def _open_iterable(self, node: object) -> Iterator[object]:
        capability: IterationCapability | None = self.capabilities.get_iteration_capability(node)
        if capability is None:
            raise InvalidChildError(describe_invalid_child(node))
        if capability.map_entries and self.config.dev_checks:
            self.diagnostics.warn_once(DiagnosticCode.MAPS_AS_CHILDREN, MAPS_AS_CHILDREN_MESSAGE)
        return capability.iterate()

    def _open_branch(self, node: object, kind: NodeKind) -> Iterator[object]:
        if kind is NodeKind.SEQUENCE:
            items: Sequence[object] = node  # type: ignore[assignment]
            return iter(items)
        if kind is NodeKind.ITERABLE:
            return self._open_iterable(node)
        raise InvalidChildError(describe_invalid_child(node))

    def _rekey(self, child: object, mapped: object, child_key: str, state: PathState) -> str:
        mapped_key: object | None = self.capabilities.get_key(mapped)
        own: str = ""
        # Keep both the mapped and the original key when they differ.
        if mapped_key and (not child or self.capabilities.get_key(child) != mapped_key):
            if self.config.dev_checks:
                check_key_coercion(
                    mapped_key, capabilities=self.capabilities, diagnostics=self.diagnostics
                )
            own = escape_user_provided_key(str(mapped_key)) + USER_KEY_DELIMITER
        return state.escaped_prefix + own + child_key

    def _visit_leaf(
        self,
        child: object,
        accumulator: list[Any],
        state: PathState,
        callback: MapCallback,
    ) -> tuple[object, PathState] | None:
        """Map one leaf; return a list result that still needs flattening."""
        if isinstance(child, bool):
            child = None
        mapped: Any = callback(child)
        child_key: str = state.leaf_name(lambda: self.derive_key(child, 0))
        logger.trace("Leaf %s: %r -> %r", child_key, child, mapped)

        if self.capabilities.is_sequence(mapped):
            return mapped, PathState.expansion_of(child_key)

        if mapped is not None:
            if self.capabilities.is_valid_element(mapped) or self.capabilities.is_portal(mapped):
                mapped = self.capabilities.clone_with_new_key(
                    mapped, self._rekey(child, mapped, child_key, state)
                )
            accumulator.append(mapped)
        return None

    # ------------------------------- strategies ------------------------------

    def _walk_recursive(
        self,
        children: object,
        accumulator: list[Any],
        state: PathState,
        callback: MapCallback,
    ) -> int:
        kind: NodeKind = classify(children, self.capabilities)

        if kind.is_leaf:
            expansion = self._visit_leaf(children, accumulator, state, callback)
            if expansion is not None:
                nested, nested_state = expansion
                self._walk_recursive(nested, accumulator, nested_state, _identity)
            return 1

        iterator: Iterator[object] = self._open_branch(children, kind)
        logger.trace("Branch %r (%s)", state.name_so_far, kind.value)
        subtree_count: int = 0
        for index, child in enumerate(iterator):
            child_state: PathState = state.descend(self.derive_key(child, index))
            subtree_count += self._walk_recursive(child, accumulator, child_state, callback)
        return subtree_count

    def _walk_iterative(
        self,
        children: object,
        accumulator: list[Any],
        state: PathState,
        callback: MapCallback,
    ) -> int:
        stack: list[_NodeFrame | _BranchFrame] = [_NodeFrame(children, state, callback, True)]
        count: int = 0

        while stack:
            frame: _NodeFrame | _BranchFrame = stack[-1]

            if isinstance(frame, _BranchFrame):
                child: object = next(frame.children, _EXHAUSTED)
                if child is _EXHAUSTED:
                    stack.pop()
                    continue
                segment: str = self.derive_key(child, frame.index)
                frame.index += 1
                stack.append(
                    _NodeFrame(child, frame.state.descend(segment), frame.callback, frame.counted)
                )
                continue

            stack.pop()
            kind: NodeKind = classify(frame.node, self.capabilities)

            if kind.is_leaf:
                if frame.counted:
                    count += 1
                expansion = self._visit_leaf(frame.node, accumulator, frame.state, frame.callback)
                if expansion is not None:
                    nested, nested_state = expansion
                    stack.append(_NodeFrame(nested, nested_state, _identity, False))
                continue

            logger.trace("Branch %r (%s)", frame.state.name_so_far, kind.value)
            stack.append(
                _BranchFrame(
                    self._open_branch(frame.node, kind),
                    frame.state,
                    frame.callback,
                    frame.counted,
                )
            )

        return count


def flatten_into(
    children: object,
    accumulator: list[Any],
    callback: MapCallback,
    *,
    state: PathState = ROOT,
    config: Config | None = None,
    capabilities: NodeCapabilities | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> int:
    """Flatten ``children`` into ``accumulator`` with a one-off `TreeFlattener`.

    Args:
        children: The tree to flatten.
        accumulator: Output list owned by the caller.
        callback: Called once per leaf; see `TreeFlattener.flatten_into`.
        state: Starting path state; leave as `ROOT` for top-level calls.
        config: Runtime configuration.
        capabilities: Node capabilities.
        diagnostics: Diagnostic sink.

    Returns:
        int: Number of leaves visited.
    """
    flattener = TreeFlattener(config=config, capabilities=capabilities, diagnostics=diagnostics)
    return flattener.flatten_into(children, accumulator, state, callback)
