# topmark:header:start
#
#   project      : rdbdump
#   file         : constants.py
#   file_relpath : src/rdbdump/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""rdbdump Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    RDBDUMP_VERSION: str = get_version("rdbdump")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    RDBDUMP_VERSION = "0.0.0"

# Major Redis version assumed when REDIS_VERSION is unset or unparsable.
DEFAULT_REDIS_VERSION: int = 7

# Environment variables consulted by the CLI (never by the encoder itself).
REDIS_VERSION_ENV: str = "REDIS_VERSION"
LOG_LEVEL_ENV: str = "RDBDUMP_LOG_LEVEL"

# Sentinel used by file arguments for STDIN/STDOUT.
STDIO_SENTINEL: str = "-"
