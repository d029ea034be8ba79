# topmark:header:start
#
#   file         : io.py
#   file_relpath : src/rdbdump/cli/io.py
#   project      : rdbdump
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Binary input/output helpers for Click commands.

Both helpers accept ``-`` for STDIN/STDOUT. Errors are mapped to CLI
exceptions with the matching exit code.
"""

from __future__ import annotations

import sys
from pathlib import Path

from rdbdump.cli.errors import RdbdumpFileNotFoundError, RdbdumpIOError
from rdbdump.config.logging import get_logger
from rdbdump.constants import STDIO_SENTINEL

logger = get_logger(__name__)


def read_input(source: str) -> bytes:
    """Read all bytes from ``source`` (a path, or ``-`` for STDIN).

    Raises:
        RdbdumpFileNotFoundError: If the path does not exist.
        RdbdumpIOError: If the path cannot be read.
    """
    if source == STDIO_SENTINEL:
        data = sys.stdin.buffer.read()
        logger.debug("Read %d bytes from STDIN", len(data))
        return data
    path = Path(source)
    try:
        data = path.read_bytes()
    except FileNotFoundError as exc:
        raise RdbdumpFileNotFoundError(f"Input file not found: {source}") from exc
    except OSError as exc:
        raise RdbdumpIOError(f"Cannot read {source}: {exc}") from exc
    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def write_output(target: str, data: bytes) -> None:
    """Write ``data`` to ``target`` (a path, or ``-`` for STDOUT).

    Raises:
        RdbdumpIOError: If the target cannot be written.
    """
    if target == STDIO_SENTINEL:
        stream = sys.stdout.buffer
        stream.write(data)
        stream.flush()
        logger.debug("Wrote %d bytes to STDOUT", len(data))
        return
    path = Path(target)
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise RdbdumpIOError(f"Cannot write {target}: {exc}") from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)
