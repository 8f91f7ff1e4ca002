# topmark:header:start
#
#   project      : NodeKeys
#   file         : main.py
#   file_relpath : src/nodekeys/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NodeKeys command line interface.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; each subcommand resolves its own configuration.
"""

from __future__ import annotations

import click

from nodekeys.cli.commands.config import config_command
from nodekeys.cli.commands.count import count_command
from nodekeys.cli.commands.flatten import flatten_command
from nodekeys.cli.commands.version import version_command
from nodekeys.cli.console import ClickConsole
from nodekeys.cli.options import common_output_options
from nodekeys.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, no_color: bool) -> None:
    """Initialize shared state (verbosity, color, logging) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = verbose

    # Internal logging is configured via env, program output via flags
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="NodeKeys CLI: flatten children trees and show their path-derived keys.",
)
@common_output_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, no_color: bool) -> None:
    """Entry point for the NodeKeys CLI."""
    init_common_state(ctx, verbose=verbose, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'nodekeys flatten [FILE|-]' to list keyed leaves.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(flatten_command)
cli.add_command(count_command)
cli.add_command(config_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
