# topmark:header:start
#
#   project      : NodeKeys
#   file         : flatten.py
#   file_relpath : src/nodekeys/cli/commands/flatten.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NodeKeys `flatten` command.

Reads a JSON node tree from a file or STDIN, flattens it and prints every leaf
together with the key the flattener assigned to its position.

Elements and portals are written as JSON objects tagged with ``"$$typeof"``
(``"element"`` or ``"portal"``); everything else is plain JSON.

Examples:
    ```bash
    echo '["a", ["b", "c"]]' | nodekeys flatten
    nodekeys flatten tree.json --format json
    nodekeys flatten tree.json --strategy iterative
    ```
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from nodekeys.children import keyed_leaves
from nodekeys.cli.cmd_common import (
    emit_diagnostics,
    get_console,
    read_tree,
    resolve_config,
)
from nodekeys.cli.errors import NodekeysDataError
from nodekeys.cli.options import common_config_options, source_argument
from nodekeys.config.logging import get_logger
from nodekeys.core.errors import InvalidChildError
from nodekeys.core.nodes import Element, Portal
from nodekeys.diagnostic.model import DiagnosticLog
from nodekeys.io.json_nodes import encode_node

if TYPE_CHECKING:
    from pathlib import Path

    from nodekeys.children import KeyedLeaf
    from nodekeys.cli.console import ClickConsole
    from nodekeys.config.logging import NodekeysLogger
    from nodekeys.config.model import Config

logger: NodekeysLogger = get_logger(__name__)


def render_leaf_value(value: Any) -> str:
    """Return a short, single-line text rendering of a leaf value."""
    if isinstance(value, Element):
        return f"<{value.type}>"
    if isinstance(value, Portal):
        return "<portal>"
    return json.dumps(value)


@click.command(
    name="flatten",
    help="Flatten a JSON node tree and print every leaf with its key.",
)
@source_argument
@common_config_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format: tab-separated 'key<TAB>value' lines, or a JSON array.",
)
def flatten_command(
    *,
    source: str,
    config_path: Path | None,
    strategy: str | None,
    dev_checks: bool | None,
    output_format: str,
) -> None:
    """Flatten a node tree and print its keyed leaves.

    Args:
        source (str): Input file, or ``-`` for STDIN.
        config_path (Path | None): Explicit config file.
        strategy (str | None): Walk strategy override.
        dev_checks (bool | None): Dev-checks override.
        output_format (str): ``text`` or ``json``.

    Raises:
        NodekeysDataError: If the tree holds an invalid child.
    """
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    config: Config = resolve_config(
        config_path=config_path, strategy=strategy, dev_checks=dev_checks
    )
    emit_diagnostics(console, config.diagnostics)

    tree: Any = read_tree(source)
    log = DiagnosticLog()
    try:
        leaves: list[KeyedLeaf] = keyed_leaves(tree, config=config, diagnostics=log)
    except InvalidChildError as e:
        raise NodekeysDataError(str(e)) from e
    logger.info("Flattened %s into %d leaves", source, len(leaves))

    if output_format.lower() == "json":
        payload: list[dict[str, Any]] = [
            {"key": leaf.key, "value": encode_node(leaf.value)} for leaf in leaves
        ]
        console.print(json.dumps(payload, indent=2))
    else:
        for leaf in leaves:
            console.print(f"{console.styled(leaf.key, fg='cyan')}\t{render_leaf_value(leaf.value)}")

    emit_diagnostics(console, log)
