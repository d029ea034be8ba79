# topmark:header:start
#
#   project      : rdbdump
#   file         : inspect.py
#   file_relpath : src/rdbdump/cli/commands/inspect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""rdbdump `inspect` command.

Decodes a snapshot written by ``rdbdump dump`` and prints its records, either
as human-readable text or as a JSON document.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from rdbdump.cli.errors import RdbdumpDataError
from rdbdump.cli.io import read_input
from rdbdump.cli.options import (
    ChecksumOrder,
    OutputFormat,
    checksum_order_option,
    output_format_option,
)
from rdbdump.constants import STDIO_SENTINEL
from rdbdump.rdb.errors import SnapshotFormatError
from rdbdump.rdb.reader import entry_to_python, load_snapshot

if TYPE_CHECKING:
    from rdbdump.cli.console import ConsoleLike
    from rdbdump.rdb.reader import Snapshot


def _render_text(console: ConsoleLike, snapshot: Snapshot, *, verbose: bool) -> None:
    console.print(
        console.styled(f"RDB version {snapshot.version}, db {snapshot.db}", bold=True)
    )
    if verbose:
        console.print(f"checksum: 0x{snapshot.checksum:016x}")
    for entry in snapshot.entries:
        key = entry.key.decode("utf-8", "replace")
        value = entry_to_python(entry)
        kind = entry.kind.name.lower()
        if isinstance(value, dict):
            console.print(f"{console.styled(key, fg='cyan')} ({kind}, {len(value)} field(s))")
            for field, item in value.items():
                console.print(f"    {field} = {item!r}")
        elif isinstance(value, list):
            console.print(f"{console.styled(key, fg='cyan')} ({kind}, {len(value)} member(s))")
            for member in value:
                console.print(f"    - {member!r}")
        else:
            console.print(f"{console.styled(key, fg='cyan')} ({kind}) = {value!r}")


@click.command(
    name="inspect",
    help="Decode a Redis snapshot written by rdbdump and print its records.",
)
@click.argument("source", default=STDIO_SENTINEL, metavar="[SNAPSHOT]")
@output_format_option
@checksum_order_option
@click.option(
    "--no-verify",
    "no_verify",
    is_flag=True,
    default=False,
    help="Do not verify the CRC-64 trailer.",
)
@click.pass_context
def inspect_command(
    ctx: click.Context,
    *,
    source: str,
    output_format: OutputFormat,
    checksum_order: ChecksumOrder,
    no_verify: bool,
) -> None:
    """Print the records of a snapshot.

    Args:
        ctx (click.Context): Click context (holds the console and verbosity).
        source (str): Snapshot path, or ``-`` for STDIN.
        output_format (OutputFormat): ``text`` or ``json``.
        checksum_order (ChecksumOrder): Byte order of the checksum trailer.
        no_verify (bool): Skip checksum verification.
    """
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    data: bytes = read_input(source)
    try:
        snapshot = load_snapshot(
            data,
            checksum_byteorder=checksum_order.byteorder,
            verify_checksum=not no_verify,
        )
    except SnapshotFormatError as exc:
        raise RdbdumpDataError(f"Invalid snapshot: {exc}") from exc

    if output_format == OutputFormat.JSON:
        payload = {
            "version": snapshot.version,
            "db": snapshot.db,
            "checksum": f"{snapshot.checksum:016x}",
            "entries": [
                {
                    "key": entry.key.decode("utf-8", "replace"),
                    "type": entry.kind.name.lower(),
                    "value": entry_to_python(entry),
                }
                for entry in snapshot.entries
            ],
        }
        console.print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    # Quiet mode keeps the exit code as the only verdict.
    if vlevel < 0:
        return

    _render_text(console, snapshot, verbose=vlevel > 0)
