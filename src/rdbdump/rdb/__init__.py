# topmark:header:start
#
#   project      : rdbdump
#   file         : __init__.py
#   file_relpath : src/rdbdump/rdb/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Redis snapshot (RDB) encoding and decoding.

Layout of a snapshot produced by rdbdump::

    "REDIS" <4 ASCII digits>          header
    0xFE <len 0>                      select database 0
    { <type> <key> <payload> }*       one record per top-level key
    0xFF                              end marker
    <8 bytes>                         CRC-64 (Jones) of everything above

Modules, leaves first: `lengths` and `crc64`, then `classifier` and `records`,
then `assembler`. `reader` is the matching decoder.
"""

from __future__ import annotations
