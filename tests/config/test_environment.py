# topmark:header:start
#
#   project      : rdbdump
#   file         : test_environment.py
#   file_relpath : tests/config/test_environment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Snapshot version selection from REDIS_VERSION and explicit overrides."""

from __future__ import annotations

import pytest

from rdbdump.config.environment import get_major_version, resolve_snapshot_version
from rdbdump.rdb.types import SnapshotVersion


@pytest.mark.parametrize(
    ("raw", "major"),
    [
        ("7", 7),
        ("7.2", 7),
        ("7.2.4", 7),
        ("6.0.16-alpine", 6),
        ("11", 11),
        ("latest", 7),
        ("", 7),
    ],
)
def test_get_major_version(raw: str, major: int) -> None:
    """The leading number is the major version; anything else falls back to 7."""
    assert get_major_version(raw) == major


def test_get_major_version_out_of_range() -> None:
    """Major versions above 255 are rejected."""
    with pytest.raises(ValueError):
        get_major_version("256.0.0")


def test_resolve_default() -> None:
    """Without override or env, the version is 0007."""
    assert resolve_snapshot_version(env={}) == SnapshotVersion("0007")


def test_resolve_from_env() -> None:
    """REDIS_VERSION selects the header digits."""
    assert resolve_snapshot_version(env={"REDIS_VERSION": "6.2.1"}).digits == "0006"


def test_override_beats_env() -> None:
    """An explicit override wins over the environment."""
    version = resolve_snapshot_version("5", env={"REDIS_VERSION": "6.2.1"})
    assert version.digits == "0005"


def test_resolve_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """By default, os.environ is consulted."""
    monkeypatch.setenv("REDIS_VERSION", "6")
    assert str(resolve_snapshot_version()) == "0006"
