# topmark:header:start
#
#   project      : rdbdump
#   file         : crc64.py
#   file_relpath : src/rdbdump/rdb/crc64.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CRC-64 "Jones" checksum used as the snapshot trailer.

Parameters: polynomial ``0xad93d23594c935a9``, reflected input and output,
initial value 0, final XOR 0. The check value of ``b"123456789"`` is
``0xe9c6d914c4b8d9ca``. Any other CRC-64 variant yields a file the server rejects.
"""

from __future__ import annotations

from typing import Final, Literal

POLY: Final[int] = 0xAD93D23594C935A9
# Bit-reversed POLY, used by the LSB-first (reflected) table.
POLY_REFLECTED: Final[int] = 0x95AC9329AC4BC9B5

_MASK64: Final[int] = 0xFFFFFFFFFFFFFFFF

ByteOrder = Literal["big", "little"]


def _build_table() -> tuple[int, ...]:
    table: list[int] = []
    for i in range(256):
        crc = i
        for _ in range(8):
            crc = (crc >> 1) ^ POLY_REFLECTED if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE: Final[tuple[int, ...]] = _build_table()


def crc64(data: bytes, crc: int = 0) -> int:
    """Return the CRC-64 of ``data``, continuing from ``crc``.

    Calls chain: ``crc64(b, crc64(a)) == crc64(a + b)``.
    """
    table = _TABLE
    for byte in data:
        crc = table[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc & _MASK64


class Crc64:
    """Running CRC-64 state fed incrementally by the snapshot writer."""

    def __init__(self) -> None:
        self._crc: int = 0

    def update(self, data: bytes) -> None:
        """Fold ``data`` into the running checksum."""
        self._crc = crc64(data, self._crc)

    @property
    def value(self) -> int:
        """Current checksum as an integer."""
        return self._crc

    def finalize(self, byteorder: ByteOrder = "big") -> bytes:
        """Return the checksum as the 8-byte trailer.

        The running state is left untouched.
        """
        return self._crc.to_bytes(8, byteorder)
