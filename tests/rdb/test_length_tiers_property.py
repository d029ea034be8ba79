# topmark:header:start
#
#   project      : rdbdump
#   file         : test_length_tiers_property.py
#   file_relpath : tests/rdb/test_length_tiers_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Long-running property tests for the length prefix tiers.

Strings straddling the 6-bit and 14-bit boundaries must survive a decode, and
every length in the 64-bit range must pick the smallest tier.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from rdbdump.rdb.lengths import decode_length, decode_string, encode_length, encode_string

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


def _expected_width(n: int) -> int:
    if n < 1 << 6:
        return 1
    if n < 1 << 14:
        return 2
    if n < 1 << 32:
        return 5
    return 9


@settings(deadline=None, max_examples=2000)
@given(n=st.integers(min_value=0, max_value=2**64 - 1))
def test_length_uses_smallest_tier(n: int) -> None:
    """Every length decodes back and takes the minimal number of bytes."""
    encoded = encode_length(n)
    assert len(encoded) == _expected_width(n)
    assert decode_length(encoded, 0) == (n, len(encoded))


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=300)
@given(blob=st.binary(min_size=50, max_size=20_000))
def test_string_blob_roundtrip_across_tiers(blob: bytes) -> None:
    """Binary strings of any tier decode to the same bytes."""
    encoded = encode_string(blob)
    assert decode_string(encoded, 0) == (blob, len(encoded))
