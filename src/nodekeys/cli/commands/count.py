# topmark:header:start
#
#   project      : NodeKeys
#   file         : count.py
#   file_relpath : src/nodekeys/cli/commands/count.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NodeKeys `count` command.

Prints the number of leaves in a JSON node tree. Null leaves inside lists are
counted, matching `nodekeys.children.count`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from nodekeys.children import count_children
from nodekeys.cli.cmd_common import (
    emit_diagnostics,
    get_console,
    read_tree,
    resolve_config,
)
from nodekeys.cli.errors import NodekeysDataError
from nodekeys.cli.options import common_config_options, source_argument
from nodekeys.core.errors import InvalidChildError
from nodekeys.diagnostic.model import DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path

    from nodekeys.cli.console import ClickConsole
    from nodekeys.config.model import Config


@click.command(
    name="count",
    help="Count the leaves of a JSON node tree.",
)
@source_argument
@common_config_options
def count_command(
    *,
    source: str,
    config_path: Path | None,
    strategy: str | None,
    dev_checks: bool | None,
) -> None:
    """Count the leaves of a node tree."""
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    config: Config = resolve_config(
        config_path=config_path, strategy=strategy, dev_checks=dev_checks
    )
    emit_diagnostics(console, config.diagnostics)

    tree: Any = read_tree(source)
    log = DiagnosticLog()
    try:
        n: int = count_children(tree, config=config, diagnostics=log)
    except InvalidChildError as e:
        raise NodekeysDataError(str(e)) from e

    console.print(str(n))
    emit_diagnostics(console, log)
