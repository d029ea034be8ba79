# topmark:header:start
#
#   project      : rdbdump
#   file         : dump.py
#   file_relpath : src/rdbdump/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""rdbdump `dump` command.

Reads a TOML document (a file or STDIN, optionally gzip-compressed), converts it
into a Redis snapshot and writes it to a file or STDOUT. The output is only
written once the whole snapshot was built, so a failing conversion leaves no
partial file behind.

Examples:
    Convert a file::

        rdbdump dump seed.toml -o dump.rdb

    Stream a compressed document::

        gunzip -c seed.toml.gz | rdbdump dump > dump.rdb
        rdbdump dump --gzipped < seed.toml.gz > dump.rdb
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rdbdump.cli.errors import RdbdumpConfigError, RdbdumpDataError, RdbdumpEncodingError
from rdbdump.cli.io import read_input, write_output
from rdbdump.cli.options import ChecksumOrder, checksum_order_option
from rdbdump.config.environment import resolve_snapshot_version
from rdbdump.config.logging import get_logger
from rdbdump.constants import STDIO_SENTINEL
from rdbdump.document.loader import DocumentError, load_document
from rdbdump.document.nodes import empty_collection_keys
from rdbdump.rdb.assembler import dump_snapshot
from rdbdump.rdb.errors import EncodingError, UnsupportedStructure

if TYPE_CHECKING:
    from rdbdump.cli.console import ConsoleLike
    from rdbdump.rdb.types import SnapshotVersion

logger = get_logger(__name__)


@click.command(
    name="dump",
    help="Convert a TOML document into a Redis snapshot (RDB) file.",
)
@click.argument("source", default=STDIO_SENTINEL, metavar="[INPUT]")
@click.option(
    "-o",
    "--output",
    "output",
    default=STDIO_SENTINEL,
    show_default=True,
    help="Output file ('-' for STDOUT).",
)
@click.option(
    "-g",
    "--gzipped",
    is_flag=True,
    default=False,
    help="Whether the input is gzip-compressed.",
)
@click.option(
    "--redis-version",
    "redis_version",
    default=None,
    metavar="X.Y.Z",
    help="Target Redis version (overrides REDIS_VERSION; default major version 7).",
)
@checksum_order_option
@click.pass_context
def dump_command(
    ctx: click.Context,
    *,
    source: str,
    output: str,
    gzipped: bool,
    redis_version: str | None,
    checksum_order: ChecksumOrder,
) -> None:
    """Convert a TOML document into a Redis snapshot.

    Args:
        ctx (click.Context): Click context (holds the console and verbosity).
        source (str): Input path, or ``-`` for STDIN.
        output (str): Output path, or ``-`` for STDOUT.
        gzipped (bool): Whether the input is gzip-compressed.
        redis_version (str | None): Target Redis version; overrides ``REDIS_VERSION``.
        checksum_order (ChecksumOrder): Byte order of the checksum trailer.
    """
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    try:
        version: SnapshotVersion = resolve_snapshot_version(redis_version)
    except ValueError as exc:
        raise RdbdumpConfigError(str(exc)) from exc

    raw: bytes = read_input(source)

    try:
        document = load_document(raw, gzipped=gzipped)
        snapshot: bytes = dump_snapshot(
            document, version, checksum_byteorder=checksum_order.byteorder
        )
    except (DocumentError, UnsupportedStructure) as exc:
        raise RdbdumpDataError(str(exc)) from exc
    except EncodingError as exc:
        raise RdbdumpEncodingError(str(exc)) from exc

    write_output(output, snapshot)

    if vlevel >= 0:
        for key in empty_collection_keys(document):
            console.warn(f"Warning: key {key!r} is empty and will be skipped by Redis on load")

    if vlevel > 0:
        target = "STDOUT" if output == STDIO_SENTINEL else output
        console.note(
            f"Wrote {len(document)} key(s), {len(snapshot)} bytes "
            f"(RDB version {version}) to {target}"
        )
