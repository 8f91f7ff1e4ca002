# topmark:header:start
#
#   project      : NodeKeys
#   file         : derive.py
#   file_relpath : src/nodekeys/core/derive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Derive the key segment of a node within its enclosing collection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nodekeys.core.capabilities import DEFAULT_CAPABILITIES
from nodekeys.core.escaping import escape, to_base36
from nodekeys.diagnostic.model import DiagnosticCode

if TYPE_CHECKING:
    from nodekeys.core.capabilities import NodeCapabilities
    from nodekeys.diagnostic.types import DiagnosticSink


def check_key_coercion(
    key: object,
    *,
    capabilities: NodeCapabilities,
    diagnostics: DiagnosticSink | None,
) -> None:
    """Report a warning if ``str(key)`` would be a surprising key; never raises."""
    problem: str | None = capabilities.check_string_coercion_safety(key)
    if problem is not None and diagnostics is not None:
        diagnostics.add_warning(problem, code=DiagnosticCode.UNSAFE_KEY_COERCION)


def derive_key(
    node: object,
    index: int,
    *,
    capabilities: NodeCapabilities = DEFAULT_CAPABILITIES,
    dev_checks: bool = False,
    diagnostics: DiagnosticSink | None = None,
) -> str:
    """Return the key segment identifying ``node`` within a set.

    An explicit key wins and is escaped; without one the segment falls back to
    the position, so reordering unkeyed nodes changes their keys.

    Args:
        node: A child node (any kind).
        index: Zero-based position used when ``node`` has no explicit key.
        capabilities: Collaborator used to read the explicit key.
        dev_checks: Whether to run the key coercion safety check.
        diagnostics: Sink receiving coercion warnings.

    Returns:
        str: ``escape(str(key))`` or ``to_base36(index)``.
    """
    key: object | None = None if node is None else capabilities.get_key(node)
    if key is not None:
        if dev_checks:
            check_key_coercion(key, capabilities=capabilities, diagnostics=diagnostics)
        return escape(str(key))
    return to_base36(index)
