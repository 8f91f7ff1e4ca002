# topmark:header:start
#
#   project      : NodeKeys
#   file         : options.py
#   file_relpath : src/nodekeys/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click option decorators for NodeKeys commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from nodekeys.config.model import FlattenStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config``, ``--strategy`` and ``--dev-checks/--no-dev-checks``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Config file (nodekeys.toml or pyproject.toml). Discovered from the CWD if omitted.",
    )(f)
    f = click.option(
        "--strategy",
        type=click.Choice([s.value for s in FlattenStrategy], case_sensitive=False),
        default=None,
        help="Tree walk strategy (overrides config).",
    )(f)
    f = click.option(
        "--dev-checks/--no-dev-checks",
        "dev_checks",
        default=None,
        help="Enable or disable development diagnostics (overrides config).",
    )(f)
    return f


def common_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``--no-color``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "--no-color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)
    return f


def source_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``SOURCE`` argument (a JSON file, or ``-`` for STDIN)."""
    return click.argument("source", default="-", metavar="[FILE|-]")(f)
