# topmark:header:start
#
#   project      : rdbdump
#   file         : main.py
#   file_relpath : src/rdbdump/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for rdbdump.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` so subcommands can share the console and verbosity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rdbdump.cli.commands.dump import dump_command
from rdbdump.cli.commands.inspect import inspect_command
from rdbdump.cli.commands.version import version_command
from rdbdump.cli.console import ClickConsole
from rdbdump.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from rdbdump.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from rdbdump.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="rdbdump: convert a TOML file into a Redis snapshot (RDB) file.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the rdbdump CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'rdbdump dump < input.toml > dump.rdb' to convert a file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(dump_command)

cli.add_command(inspect_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
