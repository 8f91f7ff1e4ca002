# topmark:header:start
#
#   project      : NodeKeys
#   file         : version.py
#   file_relpath : src/nodekeys/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NodeKeys `version` command.

Prints the current NodeKeys version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nodekeys.cli.cmd_common import get_console, get_verbosity
from nodekeys.constants import NODEKEYS_VERSION

if TYPE_CHECKING:
    from nodekeys.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of NodeKeys.",
)
def version_command() -> None:
    """Show the current version of NodeKeys."""
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    if get_verbosity(ctx) > 0:
        console.print(f"NodeKeys version {NODEKEYS_VERSION}")
    else:
        console.print(NODEKEYS_VERSION)
