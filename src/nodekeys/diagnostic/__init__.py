# topmark:header:start
#
#   project      : NodeKeys
#   file         : __init__.py
#   file_relpath : src/nodekeys/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - Diagnostics are represented by immutable `Diagnostic` instances.
    - Callers collect them in a mutable `DiagnosticLog` passed to the public
      operations as the ``diagnostics`` sink.
    - Frozen configs store diagnostics as an immutable `FrozenDiagnosticLog`.
    - Without a sink, the flattener uses `NullDiagnosticSink`.
"""

from __future__ import annotations

from nodekeys.diagnostic.model import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    FrozenDiagnosticLog,
    NullDiagnosticSink,
    compute_diagnostic_stats,
    diagnostics_counts_to_dict,
)
from nodekeys.diagnostic.types import DiagnosticSink, DiagnosticsLike

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticSink",
    "DiagnosticStats",
    "DiagnosticsLike",
    "FrozenDiagnosticLog",
    "NullDiagnosticSink",
    "compute_diagnostic_stats",
    "diagnostics_counts_to_dict",
]
