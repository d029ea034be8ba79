# topmark:header:start
#
#   project      : rdbdump
#   file         : version.py
#   file_relpath : src/rdbdump/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""rdbdump `version` command.

Prints the current rdbdump version as installed in the active Python environment,
together with the snapshot version ``dump`` would write.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from rdbdump.cli.errors import RdbdumpConfigError
from rdbdump.cli.options import OutputFormat, output_format_option
from rdbdump.config.environment import resolve_snapshot_version
from rdbdump.constants import RDBDUMP_VERSION

if TYPE_CHECKING:
    from rdbdump.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of rdbdump.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat) -> None:
    """Show the current version of rdbdump.

    Args:
        ctx (click.Context): Click context (holds the console and verbosity).
        output_format (OutputFormat): ``text`` or ``json``.
    """
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    try:
        rdb_version = str(resolve_snapshot_version())
    except ValueError as exc:
        raise RdbdumpConfigError(str(exc)) from exc

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": RDBDUMP_VERSION, "rdb_version": rdb_version}))
    elif vlevel < 0:
        return
    elif vlevel > 0:
        console.print(console.styled("rdbdump version:", bold=True, underline=True))
        console.print(f"    {console.styled(RDBDUMP_VERSION, bold=True)}")
        console.print(f"    RDB version {rdb_version}")
    else:
        console.print(console.styled(RDBDUMP_VERSION, bold=True))
