# topmark:header:start
#
#   project      : rdbdump
#   file         : errors.py
#   file_relpath : src/rdbdump/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the rdbdump CLI.

Usage:
    Commands translate core errors ([`rdbdump.rdb.errors`][rdbdump.rdb.errors])
    into these exceptions so Click prints a message and exits with a
    [`ExitCode`][rdbdump.cli.exit_codes.ExitCode].

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from rdbdump.cli.exit_codes import ExitCode


class RdbdumpCliError(click.ClickException):
    """Base class for all rdbdump CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class RdbdumpUsageError(RdbdumpCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class RdbdumpDataError(RdbdumpCliError):
    """Error for unusable input: bad TOML, unsupported structure, corrupt snapshot."""

    exit_code = ExitCode.DATA_ERROR


class RdbdumpFileNotFoundError(RdbdumpCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class RdbdumpEncodingError(RdbdumpCliError):
    """Error for values that cannot be represented in a snapshot."""

    exit_code = ExitCode.SOFTWARE_ERROR


class RdbdumpIOError(RdbdumpCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class RdbdumpConfigError(RdbdumpCliError):
    """Error for invalid runtime configuration (e.g. ``REDIS_VERSION``)."""

    exit_code = ExitCode.CONFIG_ERROR
