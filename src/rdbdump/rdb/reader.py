# topmark:header:start
#
#   project      : rdbdump
#   file         : reader.py
#   file_relpath : src/rdbdump/rdb/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode snapshots written by rdbdump.

The decoder understands exactly the subset the encoder produces: one database
selector, plain-string STRING/SET/HASH records and the end marker. Anything
else (expirations, auxiliary fields, compact encodings) is reported as a
`SnapshotFormatError` rather than skipped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast

from rdbdump.config.logging import get_logger
from rdbdump.rdb.crc64 import crc64
from rdbdump.rdb.errors import SnapshotFormatError
from rdbdump.rdb.lengths import decode_length, decode_string
from rdbdump.rdb.types import (
    CHECKSUM_SIZE,
    MAGIC,
    OPCODE_EOF,
    OPCODE_SELECTDB,
    EntryKind,
    SnapshotEntry,
)

if TYPE_CHECKING:
    from rdbdump.config.logging import RdbdumpLogger
    from rdbdump.rdb.crc64 import ByteOrder
    from rdbdump.rdb.types import HashPayload, SetPayload

logger: RdbdumpLogger = get_logger(__name__)

_HEADER_SIZE: int = len(MAGIC) + 4


@dataclass
class Snapshot:
    """Decoded snapshot.

    Attributes:
        version (str): The 4-digit header version.
        db (int): Selected database index.
        entries (list[SnapshotEntry]): Records in file order.
        checksum (int): The trailer value (0 means the checksum was disabled).
    """

    version: str
    db: int = 0
    entries: list[SnapshotEntry] = field(default_factory=list)
    checksum: int = 0

    def as_dict(self) -> dict[str, str | dict[str, str] | list[str]]:
        """Return the entries keyed by their (UTF-8 decoded) key."""
        return {e.key.decode("utf-8", "replace"): entry_to_python(e) for e in self.entries}


def entry_to_python(entry: SnapshotEntry) -> str | dict[str, str] | list[str]:
    """Render an entry's payload as text for display.

    Bytes that are not valid UTF-8 are replaced with U+FFFD.
    """

    def text(b: bytes) -> str:
        return b.decode("utf-8", "replace")

    if entry.kind is EntryKind.STRING:
        return text(cast("bytes", entry.payload))
    if entry.kind is EntryKind.HASH:
        return {text(f): text(v) for f, v in cast("HashPayload", entry.payload)}
    return [text(m) for m in cast("SetPayload", entry.payload)]


def _read_record(data: bytes, kind: EntryKind, offset: int) -> tuple[SnapshotEntry, int]:
    key, offset = decode_string(data, offset)
    if kind is EntryKind.STRING:
        value, offset = decode_string(data, offset)
        return SnapshotEntry(key=key, kind=kind, payload=value), offset
    count, offset = decode_length(data, offset)
    if kind is EntryKind.HASH:
        pairs: list[tuple[bytes, bytes]] = []
        for _ in range(count):
            f, offset = decode_string(data, offset)
            v, offset = decode_string(data, offset)
            pairs.append((f, v))
        return SnapshotEntry(key=key, kind=kind, payload=tuple(pairs)), offset
    members: list[bytes] = []
    for _ in range(count):
        m, offset = decode_string(data, offset)
        members.append(m)
    return SnapshotEntry(key=key, kind=kind, payload=tuple(members)), offset


def load_snapshot(
    data: bytes,
    *,
    checksum_byteorder: ByteOrder = "big",
    verify_checksum: bool = True,
) -> Snapshot:
    """Decode a snapshot.

    Args:
        data (bytes): The complete snapshot, trailer included.
        checksum_byteorder (ByteOrder): Byte order of the checksum trailer.
        verify_checksum (bool): Whether to compare the trailer with the CRC-64 of the
            preceding bytes. A zero trailer is always accepted, as the server does.

    Returns:
        Snapshot: The decoded snapshot.

    Raises:
        SnapshotFormatError: If ``data`` is not a well-formed snapshot.
    """
    if len(data) < _HEADER_SIZE or data[: len(MAGIC)] != MAGIC:
        raise SnapshotFormatError("Missing REDIS magic header", offset=0)
    version_bytes = data[len(MAGIC) : _HEADER_SIZE]
    if not version_bytes.isdigit():
        raise SnapshotFormatError(
            f"Invalid snapshot version {version_bytes!r}", offset=len(MAGIC)
        )
    snapshot = Snapshot(version=version_bytes.decode("ascii"))

    offset = _HEADER_SIZE
    if offset >= len(data) or data[offset] != OPCODE_SELECTDB:
        raise SnapshotFormatError("Expected database selector", offset=offset)
    snapshot.db, offset = decode_length(data, offset + 1)

    while True:
        if offset >= len(data):
            raise SnapshotFormatError("Missing end marker", offset=offset)
        opcode = data[offset]
        if opcode == OPCODE_EOF:
            offset += 1
            break
        try:
            kind = EntryKind(opcode)
        except ValueError:
            raise SnapshotFormatError(
                f"Unsupported record type 0x{opcode:02x}", offset=offset
            ) from None
        entry, offset = _read_record(data, kind, offset + 1)
        snapshot.entries.append(entry)

    trailer = data[offset:]
    if len(trailer) != CHECKSUM_SIZE:
        raise SnapshotFormatError(
            f"Expected {CHECKSUM_SIZE}-byte checksum trailer, found {len(trailer)} byte(s)",
            offset=offset,
        )
    snapshot.checksum = int.from_bytes(trailer, checksum_byteorder)
    if verify_checksum and snapshot.checksum != 0:
        expected = crc64(data[:offset])
        if expected != snapshot.checksum:
            raise SnapshotFormatError(
                f"Checksum mismatch: trailer 0x{snapshot.checksum:016x}, "
                f"computed 0x{expected:016x}",
                offset=offset,
            )

    logger.debug(
        "Decoded snapshot version %s with %d record(s)", snapshot.version, len(snapshot.entries)
    )
    return snapshot
