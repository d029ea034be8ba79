# topmark:header:start
#
#   project      : rdbdump
#   file         : lengths.py
#   file_relpath : src/rdbdump/rdb/lengths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Length encoding and length-prefixed strings.

The two top bits of the first byte tell the loader how many bytes hold the length:

| First byte   | Width   | Range            |
|--------------|---------|------------------|
| ``00xxxxxx`` | 1 byte  | ``n < 2**6``     |
| ``01xxxxxx`` | 2 bytes | ``n < 2**14``    |
| ``0x80``     | 5 bytes | ``n < 2**32``    |
| ``0x81``     | 9 bytes | ``n < 2**64``    |

The ``11xxxxxx`` tier (special encodings such as integers stored as strings or
LZF-compressed strings) is never produced and is rejected on decode.
"""

from __future__ import annotations

import struct
from typing import Final

from rdbdump.rdb.errors import EncodingError, SnapshotFormatError

RDB_6BITLEN: Final[int] = 0
RDB_14BITLEN: Final[int] = 1
RDB_32BITLEN: Final[int] = 0x80
RDB_64BITLEN: Final[int] = 0x81
RDB_ENCVAL: Final[int] = 3

# Default `proto-max-bulk-len` of the server: larger strings cannot be loaded.
MAX_STRING_LENGTH: Final[int] = 512 * 1024 * 1024

_MAX_LENGTH: Final[int] = (1 << 64) - 1


def encode_length(n: int) -> bytes:
    """Encode ``n`` with the shortest of the four length tiers.

    Args:
        n (int): Non-negative integer to encode.

    Returns:
        bytes: The encoded length (1, 2, 5 or 9 bytes).

    Raises:
        EncodingError: If ``n`` is negative or does not fit in 64 bits.
    """
    if n < 0 or n > _MAX_LENGTH:
        raise EncodingError(f"Length {n} is outside the 64-bit unsigned range")
    if n < (1 << 6):
        return bytes(((RDB_6BITLEN << 6) | n,))
    if n < (1 << 14):
        return bytes(((RDB_14BITLEN << 6) | (n >> 8), n & 0xFF))
    if n < (1 << 32):
        return struct.pack(">BI", RDB_32BITLEN, n)
    return struct.pack(">BQ", RDB_64BITLEN, n)


def encode_string(data: bytes | str) -> bytes:
    """Encode ``data`` as a length-prefixed blob.

    ``str`` values are encoded as UTF-8. Bytes are copied verbatim: no escaping,
    no compression.

    Raises:
        EncodingError: If the payload exceeds `MAX_STRING_LENGTH`.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    if len(raw) > MAX_STRING_LENGTH:
        raise EncodingError(
            f"String of {len(raw)} bytes exceeds the {MAX_STRING_LENGTH}-byte limit"
        )
    return encode_length(len(raw)) + raw


def decode_length(buf: bytes, offset: int) -> tuple[int, int]:
    """Decode a length starting at ``offset``.

    Returns:
        tuple[int, int]: The decoded length and the offset just past it.

    Raises:
        SnapshotFormatError: On truncated input or an unsupported length tier.
    """
    if offset >= len(buf):
        raise SnapshotFormatError("Truncated length", offset=offset)
    first = buf[offset]
    tier = first >> 6
    if tier == RDB_6BITLEN:
        return first & 0x3F, offset + 1
    if tier == RDB_14BITLEN:
        if offset + 2 > len(buf):
            raise SnapshotFormatError("Truncated 14-bit length", offset=offset)
        return ((first & 0x3F) << 8) | buf[offset + 1], offset + 2
    if first == RDB_32BITLEN:
        if offset + 5 > len(buf):
            raise SnapshotFormatError("Truncated 32-bit length", offset=offset)
        (n,) = struct.unpack_from(">I", buf, offset + 1)
        return n, offset + 5
    if first == RDB_64BITLEN:
        if offset + 9 > len(buf):
            raise SnapshotFormatError("Truncated 64-bit length", offset=offset)
        (n,) = struct.unpack_from(">Q", buf, offset + 1)
        return n, offset + 9
    if tier == RDB_ENCVAL:
        raise SnapshotFormatError(
            f"Special string encoding 0x{first:02x} is not supported", offset=offset
        )
    raise SnapshotFormatError(f"Unknown length encoding 0x{first:02x}", offset=offset)


def decode_string(buf: bytes, offset: int) -> tuple[bytes, int]:
    """Decode a length-prefixed blob starting at ``offset``.

    Returns:
        tuple[bytes, int]: The blob and the offset just past it.

    Raises:
        SnapshotFormatError: On truncated input or an unsupported length tier.
    """
    n, start = decode_length(buf, offset)
    end = start + n
    if end > len(buf):
        raise SnapshotFormatError(f"Truncated string of {n} bytes", offset=start)
    return bytes(buf[start:end]), end
