# topmark:header:start
#
#   project      : NodeKeys
#   file         : types.py
#   file_relpath : src/nodekeys/diagnostic/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared typing helpers for NodeKeys diagnostics.

This module defines small Protocols used to express diagnostic sinks and
diagnostic-carrying objects structurally, so the flattener can accept a
`DiagnosticLog`, a `NullDiagnosticSink`, or any caller-provided adapter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

    from nodekeys.diagnostic.model import (
        Diagnostic,
        DiagnosticStats,
    )


class DiagnosticSink(Protocol):
    """Structural interface for objects that receive flattening diagnostics."""

    def add_warning(self, message: str, *, code: str | None = None) -> None:
        """Record a warning."""
        ...

    def warn_once(self, code: str, message: str) -> bool:
        """Record a warning unless one with the same code was already recorded."""
        ...


class DiagnosticsLike(Protocol):
    """Structural interface for objects that carry diagnostics."""

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        ...

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-level counts for the contained diagnostics."""
        ...

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        ...
