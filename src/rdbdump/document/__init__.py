# topmark:header:start
#
#   project      : rdbdump
#   file         : __init__.py
#   file_relpath : src/rdbdump/document/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalized document model and the TOML loader that builds it."""

from __future__ import annotations
