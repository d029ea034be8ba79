# topmark:header:start
#
#   project      : rdbdump
#   file         : __init__.py
#   file_relpath : src/rdbdump/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""rdbdump package.

rdbdump converts a TOML document into a Redis snapshot (RDB) file. Top-level
scalars become strings, flat tables become hashes and flat arrays become sets.
The package exposes a Click CLI (`rdbdump`) and a small typed API:

- [`dump_snapshot`][rdbdump.rdb.assembler.dump_snapshot] encodes a
  normalized document into snapshot bytes.
- [`load_snapshot`][rdbdump.rdb.reader.load_snapshot] decodes a snapshot for
  inspection.
- [`load_document`][rdbdump.document.loader.load_document] parses TOML into a
  normalized document.
"""

from __future__ import annotations

from rdbdump.document.loader import load_document, parse_document
from rdbdump.document.nodes import Array, NormalizedDocument, Scalar, Table
from rdbdump.rdb.assembler import dump_snapshot, write_snapshot
from rdbdump.rdb.errors import (
    EncodingError,
    RdbdumpError,
    SnapshotFormatError,
    UnsupportedStructure,
)
from rdbdump.rdb.reader import Snapshot, load_snapshot
from rdbdump.rdb.types import EntryKind, SnapshotEntry, SnapshotVersion

__all__ = [
    "Array",
    "EncodingError",
    "EntryKind",
    "NormalizedDocument",
    "RdbdumpError",
    "Scalar",
    "Snapshot",
    "SnapshotEntry",
    "SnapshotFormatError",
    "SnapshotVersion",
    "Table",
    "UnsupportedStructure",
    "dump_snapshot",
    "load_document",
    "load_snapshot",
    "parse_document",
    "write_snapshot",
]
