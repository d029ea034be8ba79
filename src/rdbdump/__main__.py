# topmark:header:start
#
#   project      : rdbdump
#   file         : __main__.py
#   file_relpath : src/rdbdump/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running rdbdump via ``python -m rdbdump``.

It delegates directly to :func:`rdbdump.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how rdbdump is launched.

Examples:
    Convert a TOML file read from STDIN::

        python -m rdbdump dump < seed.toml > dump.rdb
"""

from __future__ import annotations

from rdbdump.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
