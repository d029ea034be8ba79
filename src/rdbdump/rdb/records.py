# topmark:header:start
#
#   project      : rdbdump
#   file         : records.py
#   file_relpath : src/rdbdump/rdb/records.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encode one snapshot entry as a record: type tag, key, payload."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from rdbdump.rdb.lengths import encode_length, encode_string
from rdbdump.rdb.types import EntryKind

if TYPE_CHECKING:
    from rdbdump.rdb.types import HashPayload, SetPayload, SnapshotEntry


def encode_record(entry: SnapshotEntry) -> bytes:
    """Return the bytes of one record.

    - STRING: the value blob.
    - HASH: the pair count, then field and value blobs in order.
    - SET: the member count, then member blobs in order.

    Raises:
        EncodingError: If a length or string cannot be encoded.
    """
    out = bytearray((entry.kind.value,))
    out += encode_string(entry.key)

    if entry.kind is EntryKind.STRING:
        out += encode_string(cast("bytes", entry.payload))
    elif entry.kind is EntryKind.HASH:
        pairs = cast("HashPayload", entry.payload)
        out += encode_length(len(pairs))
        for field, value in pairs:
            out += encode_string(field)
            out += encode_string(value)
    elif entry.kind is EntryKind.SET:
        members = cast("SetPayload", entry.payload)
        out += encode_length(len(members))
        for member in members:
            out += encode_string(member)
    else:  # pragma: no cover - EntryKind is closed
        raise ValueError(f"Unsupported entry kind: {entry.kind!r}")

    return bytes(out)
