# topmark:header:start
#
#   project      : rdbdump
#   file         : nodes.py
#   file_relpath : src/rdbdump/document/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalized document tree.

A `NormalizedDocument` maps each top-level key to a `Node`, in document order.
`Node` is a closed variant of three shapes:

- `Scalar`: a single text value (TOML strings, numbers, booleans, dates).
- `Table`: an ordered mapping of field name to child node.
- `Array`: an ordered sequence of child nodes.

Children are themselves nodes so that nesting is represented faithfully; the
classifier decides which depths are acceptable.
"""

from __future__ import annotations

import datetime as dt
import math
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union


@dataclass(frozen=True)
class Scalar:
    """A leaf value rendered as text."""

    text: str


@dataclass(frozen=True)
class Table:
    """An ordered mapping of field name to node."""

    pairs: tuple[tuple[str, Node], ...]


@dataclass(frozen=True)
class Array:
    """An ordered sequence of nodes."""

    items: tuple[Node, ...]


Node = Union[Scalar, Table, Array]

NormalizedDocument = dict[str, Node]


def _float_text(value: float) -> str:
    """Shortest round-trip digits in plain positional notation, no trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _time_text(value: dt.time | dt.datetime) -> str:
    text = f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    return text


def _offset_text(value: dt.datetime) -> str:
    offset = value.utcoffset()
    if offset is None:
        return ""
    # tomlkit names the tzinfo of a `Z` suffix "UTC"; a written +00:00 keeps its text.
    if not offset and value.tzname() == "UTC":
        return "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def scalar_text(value: Any) -> str:
    """Render a parsed TOML scalar as text.

    Booleans use TOML spelling (``true``/``false``), integers their decimal form.
    Floats print their shortest round-trip digits without an exponent and without
    a trailing ``.0`` (``1e3`` -> ``1000``, ``nan`` -> ``NaN``). Dates and times
    print in RFC 3339 form, with ``Z`` for UTC and fractional seconds trimmed.

    Raises:
        TypeError: If ``value`` is not a TOML scalar.
    """
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _float_text(float(value))
    # datetime first: datetime is a subclass of date
    if isinstance(value, dt.datetime):
        return f"{value.date().isoformat()}T{_time_text(value)}{_offset_text(value)}"
    if isinstance(value, dt.date):
        return value.isoformat()
    if isinstance(value, dt.time):
        return _time_text(value)
    raise TypeError(f"Not a TOML scalar: {type(value).__name__}")


def to_node(value: Any) -> Node:
    """Convert a parsed TOML value into a `Node`, recursively."""
    if isinstance(value, Mapping):
        return Table(tuple((str(k), to_node(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return Array(tuple(to_node(v) for v in value))
    return Scalar(scalar_text(value))


def empty_collection_keys(document: Mapping[str, Node]) -> list[str]:
    """Return the top-level keys holding an empty table or array, in order."""
    return [
        key
        for key, node in document.items()
        if (isinstance(node, Table) and not node.pairs)
        or (isinstance(node, Array) and not node.items)
    ]


def normalize(data: Mapping[str, Any]) -> NormalizedDocument:
    """Convert a parsed TOML document into a `NormalizedDocument`, preserving key order."""
    return {str(key): to_node(value) for key, value in data.items()}
