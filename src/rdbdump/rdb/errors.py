# topmark:header:start
#
#   project      : rdbdump
#   file         : errors.py
#   file_relpath : src/rdbdump/rdb/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the snapshot encoder and decoder.

These errors are **not** Click-aware. The CLI translates them into
[`rdbdump.cli.errors`][rdbdump.cli.errors] exceptions carrying an exit code.

Every error aborts the whole conversion: the encoder never hands out a
partially built snapshot.
"""

from __future__ import annotations


class RdbdumpError(Exception):
    """Base class for all rdbdump errors."""


class UnsupportedStructure(RdbdumpError):
    """A document node cannot be mapped to a Redis string, hash or set.

    Raised for nodes nested deeper than one level, and for tables or arrays holding
    duplicate hash fields or set members.

    Attributes:
        key (str): Top-level document key of the offending entry.
        path (str): Dotted path of the offending node (``key`` for top-level problems).
    """

    def __init__(self, message: str, *, key: str, path: str | None = None) -> None:
        super().__init__(message)
        self.key = key
        self.path = path or key


class EncodingError(RdbdumpError):
    """A value cannot be represented in the snapshot format.

    Raised when a length exceeds the 64-bit range, a string exceeds
    [`MAX_STRING_LENGTH`][rdbdump.rdb.lengths.MAX_STRING_LENGTH], or the
    header version is not four ASCII digits.
    """


class SnapshotFormatError(RdbdumpError):
    """A byte stream is not a valid snapshot (bad magic, truncation, bad checksum...).

    Attributes:
        offset (int | None): Byte offset at which decoding failed, if known.
    """

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (at byte offset {offset})"
        super().__init__(message)
        self.offset = offset
