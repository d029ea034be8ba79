# topmark:header:start
#
#   project      : rdbdump
#   file         : environment.py
#   file_relpath : src/rdbdump/config/environment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Select the snapshot version from the ``REDIS_VERSION`` environment variable.

``REDIS_VERSION`` holds the semantic version of the target server (``7``,
``7.2`` or ``7.2.4``). Only the major component is used; it becomes the
4-digit header version (``7`` -> ``"0007"``). Values that do not start with a
number fall back to the default major version.
"""

from __future__ import annotations

import os
import re
from typing import TYPE_CHECKING

from rdbdump.config.logging import get_logger
from rdbdump.constants import DEFAULT_REDIS_VERSION, REDIS_VERSION_ENV
from rdbdump.rdb.types import SnapshotVersion

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rdbdump.config.logging import RdbdumpLogger

logger: RdbdumpLogger = get_logger(__name__)

_SEMVER_RE: re.Pattern[str] = re.compile(r"^([0-9]+)(\.[0-9]+)?(\.[0-9]+)?")

# Major versions are kept to a single unsigned byte.
_MAX_MAJOR: int = 255


def get_major_version(semantic_version: str) -> int:
    """Return the major component of ``semantic_version``.

    Args:
        semantic_version (str): A version such as ``"7"``, ``"7.2"`` or ``"7.2.4"``.

    Returns:
        int: The major version, or `DEFAULT_REDIS_VERSION` if the value does not
            start with a number.

    Raises:
        ValueError: If the major version does not fit in 0..255.
    """
    match = _SEMVER_RE.match(semantic_version.strip())
    if match is None:
        logger.debug(
            "Unparsable Redis version %r, using default %d", semantic_version, DEFAULT_REDIS_VERSION
        )
        return DEFAULT_REDIS_VERSION
    major = int(match.group(1))
    if major > _MAX_MAJOR:
        raise ValueError(f"Invalid Redis version {semantic_version!r}: major version too large")
    return major


def resolve_snapshot_version(
    override: str | None = None,
    env: Mapping[str, str] | None = None,
) -> SnapshotVersion:
    """Resolve the snapshot version.

    Resolution order:
        1. ``override`` (e.g. the ``--redis-version`` CLI option) if given
        2. ``REDIS_VERSION`` from ``env`` (defaults to ``os.environ``)
        3. `DEFAULT_REDIS_VERSION`

    Raises:
        ValueError: If the selected version has an out-of-range major component.
    """
    environ = os.environ if env is None else env
    raw = override if override is not None else environ.get(REDIS_VERSION_ENV)
    major = DEFAULT_REDIS_VERSION if raw is None else get_major_version(raw)
    version = SnapshotVersion.from_major(major)
    logger.debug("Using snapshot version %s (from %r)", version, raw)
    return version
