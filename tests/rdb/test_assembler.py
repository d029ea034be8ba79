# topmark:header:start
#
#   project      : rdbdump
#   file         : test_assembler.py
#   file_relpath : tests/rdb/test_assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Snapshot assembler: framing, scenarios, checksum trailer, error atomicity."""

from __future__ import annotations

import io

import pytest

from rdbdump.document.nodes import Scalar, Table
from rdbdump.rdb.assembler import SnapshotWriter, dump_snapshot, write_snapshot
from rdbdump.rdb.crc64 import crc64
from rdbdump.rdb.errors import EncodingError, UnsupportedStructure
from rdbdump.rdb.types import SnapshotVersion
from tests.conftest import array, doc, table

HEADER = b"REDIS0007"
SELECT_DB0 = b"\xfe\x00"
EOF = b"\xff"


def _split(snapshot: bytes) -> tuple[bytes, int]:
    body, trailer = snapshot[:-8], snapshot[-8:]
    return body, int.from_bytes(trailer, "big")


def test_scenario_a_string() -> None:
    """A top-level scalar becomes one STRING record."""
    snapshot = dump_snapshot(doc(title=Scalar("TOML File")))
    body, checksum = _split(snapshot)
    assert body == HEADER + SELECT_DB0 + b"\x00\x05title\x09TOML File" + EOF
    assert checksum == crc64(body)


def test_scenario_b_hash() -> None:
    """A flat table becomes one HASH record."""
    body, _ = _split(dump_snapshot(doc(table=table(k="v"))))
    assert body == HEADER + SELECT_DB0 + b"\x04\x05table\x01\x01k\x01v" + EOF


def test_scenario_c_set() -> None:
    """A flat array becomes one SET record with members in input order."""
    body, _ = _split(dump_snapshot(doc(set=array("a", "b"))))
    assert body == HEADER + SELECT_DB0 + b"\x02\x03set\x02\x01a\x01b" + EOF


def test_scenario_d_empty_document() -> None:
    """An empty document is header, selector, end marker and a valid checksum."""
    snapshot = dump_snapshot({})
    body, checksum = _split(snapshot)
    assert body == HEADER + SELECT_DB0 + EOF
    assert len(snapshot) == 20
    assert checksum == crc64(body)


def test_records_follow_document_order() -> None:
    """Records are emitted in the document's key order."""
    body, _ = _split(dump_snapshot(doc(b=Scalar("2"), a=Scalar("1"))))
    assert body.index(b"\x01b\x012") < body.index(b"\x01a\x011")


def test_version_only_changes_header() -> None:
    """The version only alters bytes 5..8."""
    document = doc(title=Scalar("x"))
    v7 = dump_snapshot(document)
    v11 = dump_snapshot(document, SnapshotVersion("0011"))
    assert v11[:9] == b"REDIS0011"
    assert v7[9:-8] == v11[9:-8]
    assert v7[-8:] != v11[-8:]


def test_little_endian_trailer() -> None:
    """The trailer byte order is selectable; the body is unchanged."""
    document = doc(title=Scalar("x"))
    big = dump_snapshot(document)
    little = dump_snapshot(document, checksum_byteorder="little")
    assert big[:-8] == little[:-8]
    assert little[-8:] == big[-8:][::-1]


def test_determinism() -> None:
    """Encoding the same document twice yields identical bytes."""
    document = doc(s=Scalar("v"), h=table(a="1", b="2"), m=array("x", "y"))
    assert dump_snapshot(document) == dump_snapshot(dict(document))


@pytest.mark.parametrize(
    "bad",
    [
        Table((("inner", table(k="v")),)),
        Table((("list", array("a")),)),
        array("dup", "dup"),
    ],
)
def test_unsupported_structure_produces_no_output(bad: Table) -> None:
    """A failing key aborts the conversion; the sink receives nothing."""
    sink = io.BytesIO()
    with pytest.raises(UnsupportedStructure):
        write_snapshot(doc(ok=Scalar("fine"), bad=bad), sink)
    assert sink.getvalue() == b""


def test_write_snapshot_returns_size() -> None:
    """write_snapshot writes the full snapshot and reports its size."""
    sink = io.BytesIO()
    size = write_snapshot(doc(title=Scalar("x")), sink)
    assert sink.getvalue() == dump_snapshot(doc(title=Scalar("x")))
    assert size == len(sink.getvalue())


def test_writer_is_closed_after_finalize() -> None:
    """No mutation after the trailer was appended."""
    writer = SnapshotWriter()
    writer.write(b"abc")
    out = writer.finalize()
    assert out == b"abc" + crc64(b"abc").to_bytes(8, "big")
    with pytest.raises(RuntimeError):
        writer.write(b"more")
    with pytest.raises(RuntimeError):
        writer.finalize()


@pytest.mark.parametrize("digits", ["7", "00007", "v007", ""])
def test_invalid_version_digits(digits: str) -> None:
    """The header version must be exactly four ASCII digits."""
    with pytest.raises(EncodingError):
        SnapshotVersion(digits)


def test_version_from_major() -> None:
    """Major versions are zero-padded to four digits."""
    assert SnapshotVersion.from_major(7).header_bytes() == b"0007"
    assert str(SnapshotVersion.from_major(11)) == "0011"
    assert SnapshotVersion() == SnapshotVersion("0007")
