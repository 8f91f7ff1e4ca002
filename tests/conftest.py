# topmark:header:start
#
#   project      : NodeKeys
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the NodeKeys test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `nodekeys.config.MutableConfig` (mutable), then
      `freeze()` into a `nodekeys.config.Config` for the public operations.
    - Do **not** mutate a frozen `Config`. If you need to tweak one,
      call `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from nodekeys.config import FlattenStrategy, MutableConfig, logging

if TYPE_CHECKING:
    from pathlib import Path

    from nodekeys.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_nodekeys_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to unset ``NODEKEYS_LOG_LEVEL``.
    """
    monkeypatch.delenv("NODEKEYS_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated temporary working directory.

    Config discovery walks up from the CWD; an empty project directory keeps
    it from picking up the repository's own ``pyproject.toml``.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(
    *,
    strategy: FlattenStrategy = FlattenStrategy.RECURSIVE,
    dev_checks: bool = True,
) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        strategy (FlattenStrategy): Walk strategy.
        dev_checks (bool): Whether development diagnostics run.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.strategy = strategy
    draft.dev_checks = dev_checks
    return draft.freeze()


@pytest.fixture(params=list(FlattenStrategy), ids=lambda s: s.value)
def any_strategy_config(request: pytest.FixtureRequest) -> Config:
    """Parametrized fixture yielding a config for every walk strategy."""
    return make_config(strategy=cast("FlattenStrategy", request.param))
