# topmark:header:start
#
#   project      : rdbdump
#   file         : assembler.py
#   file_relpath : src/rdbdump/rdb/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assemble a complete snapshot from a normalized document.

The whole snapshot is built in memory: every top-level key is classified before
the first byte is written, and the caller only ever receives a finished,
checksummed byte string. Output is deterministic: no timestamps, no auxiliary
fields, records in document order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

from rdbdump.config.logging import get_logger
from rdbdump.rdb.classifier import classify
from rdbdump.rdb.crc64 import Crc64
from rdbdump.rdb.lengths import encode_length
from rdbdump.rdb.records import encode_record
from rdbdump.rdb.types import MAGIC, OPCODE_EOF, OPCODE_SELECTDB, SnapshotVersion

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rdbdump.config.logging import RdbdumpLogger
    from rdbdump.document.nodes import Node
    from rdbdump.rdb.crc64 import ByteOrder
    from rdbdump.rdb.types import SnapshotEntry

logger: RdbdumpLogger = get_logger(__name__)

# Only database 0 is ever selected.
DEFAULT_DB: int = 0


class SnapshotWriter:
    """Append-only buffer that checksums every byte written to it.

    Once [`finalize`][rdbdump.rdb.assembler.SnapshotWriter.finalize] returned, the
    writer is closed and further writes raise `RuntimeError`.
    """

    def __init__(self, *, checksum_byteorder: ByteOrder = "big") -> None:
        self._buffer = bytearray()
        self._crc = Crc64()
        self._byteorder: ByteOrder = checksum_byteorder
        self._closed = False

    @property
    def checksum(self) -> int:
        """Checksum of the bytes written so far."""
        return self._crc.value

    def write(self, data: bytes) -> None:
        """Append ``data`` and fold it into the checksum."""
        if self._closed:
            raise RuntimeError("Snapshot already finalized")
        self._buffer += data
        self._crc.update(data)

    def finalize(self) -> bytes:
        """Append the checksum trailer and return the finished snapshot."""
        if self._closed:
            raise RuntimeError("Snapshot already finalized")
        self._closed = True
        self._buffer += self._crc.finalize(self._byteorder)
        return bytes(self._buffer)


def build_entries(document: Mapping[str, Node]) -> list[SnapshotEntry]:
    """Classify every top-level key of ``document``, in order.

    Raises:
        UnsupportedStructure: If any node cannot be stored.
    """
    return [classify(key, node) for key, node in document.items()]


def dump_snapshot(
    document: Mapping[str, Node],
    version: SnapshotVersion | None = None,
    *,
    checksum_byteorder: ByteOrder = "big",
) -> bytes:
    """Encode ``document`` as a complete snapshot.

    Args:
        document (Mapping[str, Node]): Top-level keys and their nodes, in output order.
        version (SnapshotVersion | None): Header version; defaults to ``"0007"``.
        checksum_byteorder (ByteOrder): Byte order of the 8-byte checksum trailer.

    Returns:
        bytes: The snapshot, trailer included.

    Raises:
        UnsupportedStructure: If a node is nested too deeply or a set repeats a member.
        EncodingError: If a length or string cannot be encoded.
    """
    version = version or SnapshotVersion()
    entries: list[SnapshotEntry] = build_entries(document)

    writer = SnapshotWriter(checksum_byteorder=checksum_byteorder)
    writer.write(MAGIC + version.header_bytes())
    writer.write(bytes((OPCODE_SELECTDB,)) + encode_length(DEFAULT_DB))
    for entry in entries:
        writer.write(encode_record(entry))
    writer.write(bytes((OPCODE_EOF,)))

    checksum = writer.checksum
    snapshot = writer.finalize()
    logger.debug(
        "Encoded %d record(s) into %d bytes (version %s, crc64 0x%016x)",
        len(entries),
        len(snapshot),
        version,
        checksum,
    )
    return snapshot


def write_snapshot(
    document: Mapping[str, Node],
    sink: BinaryIO,
    version: SnapshotVersion | None = None,
    *,
    checksum_byteorder: ByteOrder = "big",
) -> int:
    """Encode ``document`` and write the finished snapshot to ``sink``.

    Nothing is written unless the whole snapshot could be built.

    Returns:
        int: Number of bytes written.
    """
    snapshot = dump_snapshot(document, version, checksum_byteorder=checksum_byteorder)
    sink.write(snapshot)
    return len(snapshot)
