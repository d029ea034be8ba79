# topmark:header:start
#
#   project      : rdbdump
#   file         : types.py
#   file_relpath : src/rdbdump/rdb/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Snapshot data model: entry kinds, entries, header version and opcodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final, Union

from rdbdump.constants import DEFAULT_REDIS_VERSION
from rdbdump.rdb.errors import EncodingError

MAGIC: Final[bytes] = b"REDIS"
OPCODE_SELECTDB: Final[int] = 0xFE
OPCODE_EOF: Final[int] = 0xFF

CHECKSUM_SIZE: Final[int] = 8


class EntryKind(IntEnum):
    """Redis value types supported by rdbdump.

    The member value is the type tag written in front of each record.
    """

    STRING = 0x00
    SET = 0x02
    HASH = 0x04


HashPayload = tuple[tuple[bytes, bytes], ...]
SetPayload = tuple[bytes, ...]
EntryPayload = Union[bytes, HashPayload, SetPayload]


@dataclass(frozen=True)
class SnapshotEntry:
    """One key of the snapshot, ready to be encoded.

    Attributes:
        key (bytes): Redis key.
        kind (EntryKind): Redis value type.
        payload (EntryPayload): ``bytes`` for strings, ordered ``(field, value)`` pairs
            for hashes, ordered members for sets.
    """

    key: bytes
    kind: EntryKind
    payload: EntryPayload


@dataclass(frozen=True)
class SnapshotVersion:
    """The 4-digit RDB version written after the magic tag.

    Attributes:
        digits (str): Exactly four ASCII digits, e.g. ``"0007"``.
    """

    digits: str = f"{DEFAULT_REDIS_VERSION:04d}"

    def __post_init__(self) -> None:
        if len(self.digits) != 4 or not all("0" <= c <= "9" for c in self.digits):
            raise EncodingError(f"Snapshot version must be 4 ASCII digits, got {self.digits!r}")

    @classmethod
    def from_major(cls, major: int) -> SnapshotVersion:
        """Build the version for a Redis major version (``7`` -> ``"0007"``)."""
        if not 0 <= major <= 9999:
            raise EncodingError(f"Snapshot version out of range: {major}")
        return cls(f"{major:04d}")

    def header_bytes(self) -> bytes:
        """Return the four ASCII bytes written in the header."""
        return self.digits.encode("ascii")

    def __str__(self) -> str:
        return self.digits
