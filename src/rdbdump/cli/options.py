# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/rdbdump/cli/options.py
#   project      : rdbdump
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based rdbdump CLI.

This module centralizes reusable options (verbosity, color, checksum byte order)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, Literal, ParamSpec, TypeVar, cast

import click

from rdbdump.cli.cli_types import EnumChoiceParam
from rdbdump.cli.errors import RdbdumpUsageError

P = ParamSpec("P")
R = TypeVar("R")

#: Program-output verbosity levels.
VERBOSITY_QUIET = -1
VERBOSITY_DEFAULT = 0
VERBOSITY_VERBOSE = 1
VERBOSITY_DEBUG = 2


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``-1`` when quiet, ``0`` by default, ``1`` or ``2`` when verbose.

    Raises:
        RdbdumpUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise RdbdumpUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return VERBOSITY_QUIET
    return min(verbose_count, VERBOSITY_DEBUG)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-error text output (JSON and snapshot bytes are still written).",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        output_format: Output format string, e.g. "json".
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Disables color for JSON output.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() == "json":
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


class ChecksumOrder(str, Enum):
    """Byte order of the 8-byte checksum trailer."""

    BIG = "big"
    LITTLE = "little"

    @property
    def byteorder(self) -> Literal["big", "little"]:
        """The value as accepted by `int.to_bytes`."""
        return cast("Literal['big', 'little']", self.value)


def checksum_order_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the --checksum-order option to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    return click.option(
        "--checksum-order",
        "checksum_order",
        type=EnumChoiceParam(ChecksumOrder),
        default=ChecksumOrder.BIG.value,
        show_default=True,
        help="Byte order of the CRC-64 trailer. Redis servers store it little-endian.",
    )(f)


class OutputFormat(str, Enum):
    """Output formats for human- or machine-readable reports."""

    TEXT = "text"
    JSON = "json"


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the --format option to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
