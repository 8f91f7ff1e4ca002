# topmark:header:start
#
#   project      : NodeKeys
#   file         : test_diagnostic_log.py
#   file_relpath : tests/diagnostic/test_diagnostic_log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `DiagnosticLog` and the diagnostic sinks."""

from __future__ import annotations

from nodekeys.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    FrozenDiagnosticLog,
    NullDiagnosticSink,
    compute_diagnostic_stats,
)


def test_add_and_stats() -> None:
    """Diagnostics are stored in order and counted by level."""
    log = DiagnosticLog()
    log.add_info("i")
    log.add_warning("w1")
    log.add_warning("w2", code="c")
    log.add_error("e")

    assert [d.message for d in log] == ["i", "w1", "w2", "e"]
    assert len(log) == 4
    assert log.stats().total == 4
    assert log.to_dict() == {"info": 1, "warning": 2, "error": 1}
    assert log.has_warning()
    assert log.has_error()
    assert log.codes() == ["c"]


def test_empty_log() -> None:
    """An empty log has no warnings or errors."""
    log = DiagnosticLog()
    assert not log.has_warning()
    assert not log.has_error()
    assert log.to_dict() == {"info": 0, "warning": 0, "error": 0}


def test_warn_once_is_scoped_to_the_log() -> None:
    """De-duplication is per log, not per process."""
    first = DiagnosticLog()
    assert first.warn_once("code", "message")
    assert not first.warn_once("code", "message again")
    assert first.warn_once("other", "message")
    assert len(first) == 2

    second = DiagnosticLog()
    assert second.warn_once("code", "message")


def test_warn_once_respects_coded_warnings() -> None:
    """A coded warning added directly also suppresses later ``warn_once`` calls."""
    log = DiagnosticLog()
    log.add_warning("direct", code="code")
    assert not log.warn_once("code", "once")


def test_freeze_and_from_iterable() -> None:
    """Freezing snapshots the items; rebuilding restores de-duplication state."""
    log = DiagnosticLog()
    log.warn_once("code", "message")

    frozen = log.freeze()
    assert isinstance(frozen, FrozenDiagnosticLog)
    assert list(frozen) == log.items
    assert frozen.to_dict()["warning"] == 1

    rebuilt = DiagnosticLog.from_iterable(frozen)
    assert not rebuilt.warn_once("code", "message")


def test_null_sink_records_nothing() -> None:
    """The null sink accepts warnings and never reports them as recorded."""
    sink = NullDiagnosticSink()
    sink.add_warning("dropped", code="c")
    assert sink.warn_once("c", "dropped") is False


def test_compute_stats_from_any_iterable() -> None:
    """Stats work for plain iterables of diagnostics."""
    items = (Diagnostic(DiagnosticLevel.ERROR, "x"), Diagnostic(DiagnosticLevel.INFO, "y"))
    stats = compute_diagnostic_stats(iter(items))
    assert (stats.n_info, stats.n_warning, stats.n_error) == (1, 0, 1)


def test_level_colors_wrap_text() -> None:
    """Each level maps to a color function that keeps the text."""
    for level in DiagnosticLevel:
        assert "text" in level.color("text")
