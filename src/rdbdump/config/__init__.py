# topmark:header:start
#
#   project      : rdbdump
#   file         : __init__.py
#   file_relpath : src/rdbdump/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for rdbdump.

rdbdump has no configuration files. Its runtime knobs are environment variables
read at the CLI boundary:

- ``REDIS_VERSION``: semantic version of the target Redis server; its major
  component selects the 4-digit snapshot version (see
  [`rdbdump.config.environment`][rdbdump.config.environment]).
- ``RDBDUMP_LOG_LEVEL``: internal log level (see
  [`rdbdump.config.logging`][rdbdump.config.logging]).
"""

from __future__ import annotations
