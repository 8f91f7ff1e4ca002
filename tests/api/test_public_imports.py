# topmark:header:start
#
#   project      : NodeKeys
#   file         : test_public_imports.py
#   file_relpath : tests/api/test_public_imports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Smoke tests for public imports and ``__all__``."""

from __future__ import annotations

import inspect
from types import ModuleType


def test_package_all_contains_expected_symbols() -> None:
    """``nodekeys.__all__`` exposes the stable symbols."""
    import nodekeys

    expected: set[str] = {
        "Children",
        "Config",
        "DiagnosticLog",
        "Element",
        "InvalidChildError",
        "OnlyChildError",
        "Portal",
        "children",
    }
    missing: set[str] = expected - set(nodekeys.__all__)
    assert not missing, f"Missing from nodekeys.__all__: {sorted(missing)}"


def test_exported_symbols_resolve() -> None:
    """Every exported symbol is a module, a callable or a type."""
    import nodekeys

    for name in nodekeys.__all__:
        obj = getattr(nodekeys, name)
        assert isinstance(obj, ModuleType) or callable(obj) or inspect.isclass(obj)


def test_children_module_stable_names() -> None:
    """The short operation names are available on the ``children`` module."""
    from nodekeys import children

    for name in ("map", "for_each", "count", "only", "to_array"):
        assert callable(getattr(children, name))


def test_cli_entry_point_imports() -> None:
    """The CLI group imports cleanly."""
    from nodekeys.cli.main import cli

    assert cli.name == "cli"
    assert set(cli.commands) == {"flatten", "count", "config", "version"}
