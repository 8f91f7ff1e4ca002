# topmark:header:start
#
#   project      : NodeKeys
#   file         : cmd_common.py
#   file_relpath : src/nodekeys/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by NodeKeys CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import click

from nodekeys.cli.errors import (
    NodekeysConfigError,
    NodekeysDataError,
    NodekeysFileNotFoundError,
    NodekeysIOError,
    NodekeysUsageError,
)
from nodekeys.config.logging import get_logger
from nodekeys.config.model import FlattenStrategy, MutableConfig
from nodekeys.core.errors import ConfigError
from nodekeys.io.json_nodes import NodeDecodeError, loads_nodes

if TYPE_CHECKING:
    from nodekeys.cli.console import ClickConsole
    from nodekeys.config.logging import NodekeysLogger
    from nodekeys.config.model import Config
    from nodekeys.diagnostic.types import DiagnosticsLike

logger: NodekeysLogger = get_logger(__name__)

STDIN_SOURCE: str = "-"


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the Click context by the group."""
    ctx.ensure_object(dict)
    return cast("ClickConsole", ctx.obj["console"])


def get_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (count of ``-v``)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def read_source_text(source: str) -> str:
    """Read the raw input text from a file path or STDIN.

    Raises:
        NodekeysUsageError: If STDIN was selected but is empty.
        NodekeysFileNotFoundError: If the file does not exist.
        NodekeysIOError: If the file cannot be read.
        NodekeysDataError: If the file is not valid UTF-8.
    """
    if source == STDIN_SOURCE:
        text: str = click.get_text_stream("stdin").read()
        if not text.strip():
            raise NodekeysUsageError("No data received on STDIN while '-' was specified.")
        return text
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise NodekeysFileNotFoundError(f"No such file: {path}") from e
    except UnicodeDecodeError as e:
        raise NodekeysDataError(f"Cannot decode {path} as UTF-8: {e}") from e
    except OSError as e:
        raise NodekeysIOError(f"Cannot read {path}: {e}") from e


def read_tree(source: str) -> Any:
    """Read and decode a JSON node tree from ``source``.

    Raises:
        NodekeysDataError: If the input is not a valid node tree document.
    """
    text: str = read_source_text(source)
    try:
        return loads_nodes(text)
    except NodeDecodeError as e:
        raise NodekeysDataError(str(e)) from e


def emit_diagnostics(console: ClickConsole, diagnostics: DiagnosticsLike) -> None:
    """Print collected diagnostics to stderr, colored by severity."""
    for diagnostic in diagnostics:
        label: str = f"[{diagnostic.level.value}]"
        if console.enable_color:
            label = diagnostic.level.color(label)
        console.warn(f"{label} {diagnostic.message}")


def resolve_config(
    *,
    config_path: Path | None,
    strategy: str | None,
    dev_checks: bool | None,
) -> Config:
    """Resolve the effective config: defaults, then one file, then CLI overrides.

    Args:
        config_path: Explicit config file from ``--config``; when None, a file is
            discovered from the current working directory.
        strategy: ``--strategy`` override, if given.
        dev_checks: ``--dev-checks/--no-dev-checks`` override, if given.

    Returns:
        Config: The frozen effective configuration.

    Raises:
        NodekeysConfigError: If the config cannot be read or holds invalid values.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            config_path=config_path,
            start=None if config_path is not None else Path.cwd(),
        )
        overrides = MutableConfig(
            strategy=FlattenStrategy.parse(strategy) if strategy is not None else None,
            dev_checks=dev_checks,
        )
    except ConfigError as e:
        raise NodekeysConfigError(str(e)) from e

    config: Config = draft.merge_with(overrides).freeze()
    logger.debug("Effective config: %s", config)
    return config
