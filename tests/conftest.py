"""Shared test fixtures for structschema tests.

Provides CliRunner fixtures, Go source fixtures and a structlog
configuration that tests can capture.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from structschema.source import SourceFile, TypeExpr, parse_source


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    Without this, a logging configuration installed by an earlier CLI
    invocation would leak into the next test.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture(autouse=True)
def clear_structschema_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep STRUCTSCHEMA_* variables from the developer shell out of tests."""
    for name in list(os.environ):
        if name.startswith("STRUCTSCHEMA_"):
            monkeypatch.delenv(name)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    Yields:
        CliRunner whose working directory is a fresh temporary directory.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the Go fixture directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def user_go(fixtures_dir: Path) -> Path:
    """Return the path to the User struct fixture."""
    return fixtures_dir / "user.go"


@pytest.fixture
def account_go(fixtures_dir: Path) -> Path:
    """Return the path to the multi-declaration Account fixture."""
    return fixtures_dir / "account.go"


@pytest.fixture
def write_go(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture writing Go source to a temporary file.

    Returns:
        Function taking source text (and optional file name) and
        returning the written path.
    """

    def _write(content: str, filename: str = "types.go") -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def struct_of() -> Callable[[str], TypeExpr]:
    """Factory fixture parsing ``type T struct {...}`` bodies.

    Returns:
        Function taking the struct body (field lines) and returning the
        parsed struct type expression.
    """

    def _parse(body: str) -> TypeExpr:
        source: SourceFile = parse_source(f"package p\n\ntype T struct {{\n{body}\n}}\n")
        struct_type = source.type_decls[0].type
        assert struct_type.is_struct
        return struct_type

    return _parse
