# topmark:header:start
#
#   project      : rdbdump
#   file         : loader.py
#   file_relpath : src/rdbdump/document/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML input into a normalized document.

Parsing is done with `tomlkit` and the result is unwrapped to plain Python
structures before normalization, so key order follows the source document.
Optional gzip decompression happens before decoding.
"""

from __future__ import annotations

import gzip
import zlib
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from rdbdump.config.logging import get_logger
from rdbdump.document.nodes import normalize
from rdbdump.rdb.errors import RdbdumpError

if TYPE_CHECKING:
    from rdbdump.config.logging import RdbdumpLogger
    from rdbdump.document.nodes import NormalizedDocument

logger: RdbdumpLogger = get_logger(__name__)


class DocumentError(RdbdumpError):
    """The input cannot be turned into a normalized document (bad gzip, UTF-8 or TOML)."""


def parse_document(text: str) -> NormalizedDocument:
    """Parse TOML text into a `NormalizedDocument`.

    Args:
        text (str): TOML document text.

    Returns:
        NormalizedDocument: Top-level keys mapped to nodes, in document order.

    Raises:
        DocumentError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise DocumentError(f"Invalid TOML: {exc}") from exc
    data: Any = doc.unwrap()
    document: NormalizedDocument = normalize(data)
    logger.debug("Parsed TOML document with %d top-level key(s)", len(document))
    return document


def load_document(source: bytes, *, gzipped: bool = False) -> NormalizedDocument:
    """Decode raw input bytes and parse them as TOML.

    Args:
        source (bytes): Raw input, UTF-8 TOML (optionally gzip-compressed).
        gzipped (bool): Whether ``source`` is gzip-compressed.

    Returns:
        NormalizedDocument: The parsed document.

    Raises:
        DocumentError: If decompression, UTF-8 decoding or TOML parsing fails.
    """
    if gzipped:
        try:
            source = gzip.decompress(source)
        except (OSError, EOFError, zlib.error) as exc:
            raise DocumentError(f"Invalid gzip input: {exc}") from exc
        logger.trace("Decompressed gzip input to %d bytes", len(source))
    try:
        text: str = source.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentError(f"Input is not valid UTF-8: {exc}") from exc
    return parse_document(text)
