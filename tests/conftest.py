# topmark:header:start
#
#   project      : rdbdump
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the rdbdump test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
and provides small helpers shared by the encoder and CLI tests.
"""

from __future__ import annotations

import logging as std_logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from rdbdump.config import logging
from rdbdump.constants import LOG_LEVEL_ENV, REDIS_VERSION_ENV
from rdbdump.document.nodes import Array, Scalar, Table

if TYPE_CHECKING:
    from rdbdump.document.nodes import Node, NormalizedDocument

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell does not leak settings into tests.

    ``RDBDUMP_LOG_LEVEL`` would add log noise and ``REDIS_VERSION`` would change
    the header of every snapshot.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(REDIS_VERSION_ENV, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Restore root logger handlers and level after each test.

    CLI invocations call `setup_logging`, which replaces root handlers with one bound
    to the (short-lived) stream of the Click test runner.
    """
    root = std_logging.getLogger()

    def ours(handler: std_logging.Handler) -> bool:
        return isinstance(handler.formatter, logging.ChalkFormatter)

    before = [h for h in root.handlers if ours(h)]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if ours(handler) and handler not in before:
            root.removeHandler(handler)
    for handler in before:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for the test run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def doc(**nodes: Node) -> NormalizedDocument:
    """Build a `NormalizedDocument` from keyword arguments (order preserved)."""
    return dict(nodes)


def table(**fields: str) -> Table:
    """Build a flat `Table` node from keyword arguments."""
    return Table(tuple((k, Scalar(v)) for k, v in fields.items()))


def array(*items: str) -> Array:
    """Build a flat `Array` node."""
    return Array(tuple(Scalar(i) for i in items))
