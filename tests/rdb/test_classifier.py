# topmark:header:start
#
#   project      : rdbdump
#   file         : test_classifier.py
#   file_relpath : tests/rdb/test_classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value classifier: node shapes to entry kinds, nesting and duplicate rejection."""

from __future__ import annotations

import logging

import pytest

from rdbdump.document.nodes import Array, Scalar, Table
from rdbdump.rdb.classifier import classify
from rdbdump.rdb.errors import UnsupportedStructure
from rdbdump.rdb.types import EntryKind, SnapshotEntry
from tests.conftest import array, table


def test_scalar_becomes_string() -> None:
    """A scalar maps to a STRING entry with UTF-8 payload."""
    assert classify("title", Scalar("TOML File")) == SnapshotEntry(
        key=b"title", kind=EntryKind.STRING, payload=b"TOML File"
    )


def test_table_becomes_hash_in_order() -> None:
    """A flat table maps to a HASH entry with pairs in input order."""
    entry = classify("table", table(z="1", a="2", m="3"))
    assert entry.kind is EntryKind.HASH
    assert entry.payload == ((b"z", b"1"), (b"a", b"2"), (b"m", b"3"))


def test_array_becomes_set_in_order() -> None:
    """A flat array maps to a SET entry with members in input order."""
    entry = classify("set", array("b", "a"))
    assert entry.kind is EntryKind.SET
    assert entry.payload == (b"b", b"a")


def test_non_ascii_keys_and_values_are_utf8() -> None:
    """Keys and values are encoded as UTF-8."""
    entry = classify("clé", Scalar("wörld"))
    assert entry.key == "clé".encode()
    assert entry.payload == "wörld".encode()


@pytest.mark.parametrize(
    ("node", "path"),
    [
        (Table((("inner", table(k="v")),)), "outer.inner"),
        (Table((("list", array("a")),)), "outer.list"),
        (Array((Scalar("a"), table(k="v"))), "outer[1]"),
        (Array((array("a"),)), "outer[0]"),
    ],
)
def test_nesting_is_rejected(node: Table | Array, path: str) -> None:
    """Tables and arrays may only hold scalars."""
    with pytest.raises(UnsupportedStructure) as excinfo:
        classify("outer", node)
    assert excinfo.value.key == "outer"
    assert excinfo.value.path == path


def test_duplicate_set_members_are_rejected() -> None:
    """Duplicates are an error, not silently dropped."""
    with pytest.raises(UnsupportedStructure, match="duplicate set member 'a'"):
        classify("set", array("a", "b", "a"))


def test_duplicate_hash_fields_are_rejected() -> None:
    """A table assembled in code with a repeated field cannot become a hash."""
    node = Table((("k", Scalar("1")), ("other", Scalar("2")), ("k", Scalar("3"))))
    with pytest.raises(UnsupportedStructure, match="duplicate hash field 'k'") as excinfo:
        classify("tbl", node)
    assert excinfo.value.path == "tbl.k"


def test_unknown_node_type_is_a_type_error() -> None:
    """Only the three node variants are accepted."""
    with pytest.raises(TypeError):
        classify("bad", "not a node")  # type: ignore[arg-type]


def test_empty_collections_warn(caplog: pytest.LogCaptureFixture) -> None:
    """Empty hashes and sets are encoded, with a warning."""
    with caplog.at_level(logging.WARNING, logger="rdbdump.rdb.classifier"):
        entry = classify("empty", Array(()))
    assert entry.kind is EntryKind.SET
    assert entry.payload == ()
    assert "empty" in caplog.text
