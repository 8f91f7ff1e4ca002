# topmark:header:start
#
#   project      : NodeKeys
#   file         : model.py
#   file_relpath : src/nodekeys/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for NodeKeys.

Diagnostics report conditions that are worth surfacing but never abort a
flattening pass (e.g. a mapping items view used as a children container, or a
key whose string coercion is surprising). Flattening reports them to a
*sink* passed in by the caller instead of to process-wide state.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable structured diagnostic payload (level + message + code).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable collection with helpers for adding, de-duplicating
      and summarizing diagnostics.
    * FrozenDiagnosticLog: immutable snapshot container for frozen configs.
    * NullDiagnosticSink: sink that drops diagnostics after logging them at DEBUG.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from nodekeys.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from nodekeys.config.logging import NodekeysLogger


logger: NodekeysLogger = get_logger(__name__)


class DiagnosticCode:
    """Stable identifiers for diagnostics emitted by the flattener."""

    MAPS_AS_CHILDREN: Final[str] = "maps-as-children"
    UNSAFE_KEY_COERCION: Final[str] = "unsafe-key-coercion"
    UNKNOWN_CONFIG_KEY: Final[str] = "unknown-config-key"


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, message and optional code."""

    level: DiagnosticLevel
    message: str
    code: str | None = None


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics.

    A log is typically created by the caller of a flattening operation and
    passed in as its diagnostic sink. ``warn_once`` de-duplicates by code for
    the lifetime of the log, which replaces a process-wide "warned already"
    flag: two independent logs each receive their own warning.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])
    _seen_codes: set[str] = field(default_factory=lambda: set[str](), repr=False)

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a DiagnosticLog from an iterable of diagnostics.

        Args:
            diagnostics: Existing diagnostics (e.g., from a frozen snapshot).

        Returns:
            A new DiagnosticLog containing the provided diagnostics.
        """
        log = cls()
        for diagnostic in diagnostics:
            log._add(diagnostic)
        return log

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        if diagnostic.code is not None:
            self._seen_codes.add(diagnostic.code)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str, *, code: str | None = None) -> None:
        """Add an ``info`` diagnostic to the diagnostic log.

        Args:
            message: The diagnostic message.
            code: Optional stable diagnostic code.
        """
        self._add(Diagnostic(DiagnosticLevel.INFO, message, code))

    def add_warning(self, message: str, *, code: str | None = None) -> None:
        """Add a ``warning`` diagnostic to the diagnostic log.

        Args:
            message: The diagnostic message.
            code: Optional stable diagnostic code.
        """
        logger.warning("%s", message)
        self._add(Diagnostic(DiagnosticLevel.WARNING, message, code))

    def add_error(self, message: str, *, code: str | None = None) -> None:
        """Add an ``error`` diagnostic to the diagnostic log.

        Args:
            message: The diagnostic message.
            code: Optional stable diagnostic code.
        """
        logger.error("%s", message)
        self._add(Diagnostic(DiagnosticLevel.ERROR, message, code))

    def warn_once(self, code: str, message: str) -> bool:
        """Add a ``warning`` unless a diagnostic with ``code`` was already recorded.

        Args:
            code: Stable diagnostic code used for de-duplication.
            message: The diagnostic message.

        Returns:
            True if the warning was recorded, False if it was suppressed.
        """
        if code in self._seen_codes:
            return False
        self.add_warning(message, code=code)
        return True

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if the DiagnosticLog contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the DiagnosticLog contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def codes(self) -> list[str]:
        """Return the codes of all coded diagnostics, in insertion order."""
        return [d.code for d in self.items if d.code is not None]

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity.

        Returns:
            Mapping with keys ``"info"``, ``"warning"``, and ``"error"``
            reflecting the number of diagnostics at each level.
        """
        return diagnostics_counts_to_dict(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over all diagnostics stored in this log."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of diagnostics stored in this log."""
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable counterpart to `DiagnosticLog`, stored on frozen configs."""

    items: tuple[Diagnostic, ...]

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of contained diagnostics."""
        return len(self.items)

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-level counts for the contained diagnostics."""
        return compute_diagnostic_stats(self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return diagnostics_counts_to_dict(self.items)


class NullDiagnosticSink:
    """Diagnostic sink that records nothing.

    Used when the caller does not supply a sink. Messages are still logged at
    DEBUG so they remain discoverable via ``NODEKEYS_LOG_LEVEL``.
    """

    def add_warning(self, message: str, *, code: str | None = None) -> None:
        """Log and drop a warning."""
        logger.debug("Dropped warning [%s]: %s", code, message)

    def warn_once(self, code: str, message: str) -> bool:
        """Log and drop a warning; never reports it as recorded."""
        self.add_warning(message, code=code)
        return False


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostic log.

    Returns:
        Per-level counts for diagnostics in this log.
    """
    items: list[Diagnostic] = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)


def diagnostics_counts_to_dict(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    """Return a JSON-friendly mapping of counts by severity for any iterable."""
    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    return {
        "info": stats.n_info,
        "warning": stats.n_warning,
        "error": stats.n_error,
    }
