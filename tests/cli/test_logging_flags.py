# topmark:header:start
#
#   project      : rdbdump
#   file         : test_logging_flags.py
#   file_relpath : tests/cli/test_logging_flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: logging verbosity and quietness flags.

Ensures that combinations of `-v`/`-vvv` and `-q`/`-qq` parse correctly,
that they cannot be combined, and that verbose `dump` reports what it wrote.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rdbdump.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_verbose_and_quiet_flags_parse() -> None:
    """It should accept verbosity and quietness flags and exit with code 0."""
    for args in (["-v", "version"], ["-vvv", "version"], ["-q", "version"], ["-qq", "version"]):
        result: Result = run_cli(args)

        assert_SUCCESS(result)


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """Combining -v and -q is a usage error."""
    assert_exit(run_cli(["-v", "-q", "version"]), ExitCode.USAGE_ERROR)


@mark_cli
def test_verbose_dump_reports_summary(tmp_path: Path) -> None:
    """`-v dump` notes the key count and byte size once the file is written."""
    result: Result = run_cli_in(
        tmp_path, ["--no-color", "-v", "dump", "-o", "out.rdb"], input_data=b'a = "1"\n'
    )

    assert_SUCCESS(result)
    size = (tmp_path / "out.rdb").stat().st_size
    assert f"Wrote 1 key(s), {size} bytes (RDB version 0007) to out.rdb" in result.output


@mark_cli
def test_log_level_env_accepted(tmp_path: Path) -> None:
    """RDBDUMP_LOG_LEVEL turns on internal logging without changing the output file."""
    quiet: Result = run_cli_in(tmp_path, ["dump", "-o", "a.rdb"], input_data=b"x = 1\n")
    assert_SUCCESS(quiet)

    noisy: Result = run_cli(
        ["dump", "-o", str(tmp_path / "b.rdb")],
        input_data=b"x = 1\n",
        env={"RDBDUMP_LOG_LEVEL": "TRACE"},
    )
    assert_SUCCESS(noisy)
    assert (tmp_path / "a.rdb").read_bytes() == (tmp_path / "b.rdb").read_bytes()


@mark_cli
def test_quiet_suppresses_text_output(tmp_path: Path) -> None:
    """`-q` silences text output but keeps requested JSON."""
    result: Result = run_cli(["-q", "version"])
    assert_SUCCESS(result)
    assert result.output == ""

    result = run_cli(["-q", "version", "--format", "json"])
    assert_SUCCESS(result)
    assert '"version"' in result.output

    result = run_cli_in(tmp_path, ["-q", "dump", "-o", "out.rdb"], input_data=b"e = []\n")
    assert_SUCCESS(result)
    assert result.output == ""
    assert (tmp_path / "out.rdb").exists()

    result = run_cli_in(tmp_path, ["-q", "inspect", "out.rdb"])
    assert_SUCCESS(result)
    assert result.output == ""
