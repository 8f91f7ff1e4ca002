# topmark:header:start
#
#   project      : NodeKeys
#   file         : config.py
#   file_relpath : src/nodekeys/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NodeKeys `config` command.

Prints the effective configuration (defaults, then the discovered or explicit
config file, then CLI overrides) as a ``nodekeys.toml`` document. With ``-v``
the sources that contributed are listed as TOML comments first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nodekeys.cli.cmd_common import (
    emit_diagnostics,
    get_console,
    get_verbosity,
    resolve_config,
)
from nodekeys.cli.options import common_config_options

if TYPE_CHECKING:
    from pathlib import Path

    from nodekeys.cli.console import ClickConsole
    from nodekeys.config.model import Config


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
)
@common_config_options
def config_command(
    *,
    config_path: Path | None,
    strategy: str | None,
    dev_checks: bool | None,
) -> None:
    """Print the effective configuration."""
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    config: Config = resolve_config(
        config_path=config_path, strategy=strategy, dev_checks=dev_checks
    )

    if get_verbosity(ctx) > 0:
        for source in config.config_files:
            console.print(f"# source: {source}")
    console.print(config.to_toml(), nl=False)
    emit_diagnostics(console, config.diagnostics)
