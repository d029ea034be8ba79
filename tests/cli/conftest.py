# topmark:header:start
#
#   project      : rdbdump
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running rdbdump through Click's test runner."""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from rdbdump.cli.exit_codes import ExitCode
from rdbdump.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_data: str | bytes | IO[Any] | None = None,
    env: dict[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["dump"]``.
        input_data (str | bytes | IO[Any] | None): Optional standard input.
        env (dict[str, str | None] | None): Environment overrides for the invocation.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_data, env=env)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_data: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Relative input/output paths in ``argv`` then resolve inside ``tmp_path``.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD.
        argv (str | Sequence[str] | None): CLI argument vector.
        input_data (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, input_data=input_data)
    finally:
        os.chdir(cwd)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, (result.exit_code, result.output)
