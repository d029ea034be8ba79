# topmark:header:start
#
#   project      : rdbdump
#   file         : classifier.py
#   file_relpath : src/rdbdump/rdb/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Map document nodes to snapshot entries.

| Node     | Entry kind | Payload                         |
|----------|------------|---------------------------------|
| `Scalar` | STRING     | UTF-8 bytes of the text         |
| `Table`  | HASH       | ``(field, value)`` pairs, ordered |
| `Array`  | SET        | members, ordered                |

Only one level of nesting is accepted: children of tables and arrays must be
scalars. Tables must not repeat a field and arrays must not repeat a member.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rdbdump.config.logging import get_logger
from rdbdump.document.nodes import Array, Scalar, Table
from rdbdump.rdb.errors import UnsupportedStructure
from rdbdump.rdb.types import EntryKind, SnapshotEntry

if TYPE_CHECKING:
    from rdbdump.config.logging import RdbdumpLogger
    from rdbdump.document.nodes import Node

logger: RdbdumpLogger = get_logger(__name__)


def _describe(node: Node) -> str:
    return "table" if isinstance(node, Table) else "array"


def _classify_table(key: str, node: Table) -> SnapshotEntry:
    pairs: list[tuple[bytes, bytes]] = []
    seen: set[bytes] = set()
    for field, child in node.pairs:
        if not isinstance(child, Scalar):
            raise UnsupportedStructure(
                f"Key {key!r}: field {field!r} holds a nested {_describe(child)}; "
                "only flat tables can be stored as hashes",
                key=key,
                path=f"{key}.{field}",
            )
        name = field.encode("utf-8")
        if name in seen:
            raise UnsupportedStructure(
                f"Key {key!r}: duplicate hash field {field!r}",
                key=key,
                path=f"{key}.{field}",
            )
        seen.add(name)
        pairs.append((name, child.text.encode("utf-8")))
    return SnapshotEntry(key=key.encode("utf-8"), kind=EntryKind.HASH, payload=tuple(pairs))


def _classify_array(key: str, node: Array) -> SnapshotEntry:
    members: list[bytes] = []
    seen: set[bytes] = set()
    for index, child in enumerate(node.items):
        if not isinstance(child, Scalar):
            raise UnsupportedStructure(
                f"Key {key!r}: item {index} is a nested {_describe(child)}; "
                "only flat arrays can be stored as sets",
                key=key,
                path=f"{key}[{index}]",
            )
        member = child.text.encode("utf-8")
        if member in seen:
            raise UnsupportedStructure(
                f"Key {key!r}: duplicate set member {child.text!r} at item {index}",
                key=key,
                path=f"{key}[{index}]",
            )
        seen.add(member)
        members.append(member)
    return SnapshotEntry(key=key.encode("utf-8"), kind=EntryKind.SET, payload=tuple(members))


def classify(key: str, node: Node) -> SnapshotEntry:
    """Return the snapshot entry for a top-level key.

    Args:
        key (str): Top-level document key.
        node (Node): The node stored under ``key``.

    Returns:
        SnapshotEntry: The entry to encode.

    Raises:
        UnsupportedStructure: If a table or array holds a non-scalar child,
            a table repeats a field or an array repeats a member.
        TypeError: If ``node`` is not a document node.
    """
    match node:
        case Scalar(text=text):
            entry = SnapshotEntry(
                key=key.encode("utf-8"), kind=EntryKind.STRING, payload=text.encode("utf-8")
            )
        case Table():
            entry = _classify_table(key, node)
        case Array():
            entry = _classify_array(key, node)
        case _:
            raise TypeError(f"Unsupported node type for key {key!r}: {type(node).__name__}")

    if entry.kind is not EntryKind.STRING and not entry.payload:
        # The server skips empty keys when loading.
        logger.warning("Key %r is an empty %s and will be skipped by Redis", key, entry.kind.name)
    logger.trace("Classified %r as %s", key, entry.kind.name)
    return entry
