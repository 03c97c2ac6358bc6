"""Unit tests for structschema.cli.output."""

from __future__ import annotations

from collections.abc import Generator
from unittest.mock import patch

import pytest
from rich.console import Console

from structschema.cli import output


@pytest.fixture
def plain_console() -> Generator[Console, None, None]:
    """Swap in a colorless console for the duration of a test."""
    original = output.console
    output.console = output.create_console(no_color=True)
    yield output.console
    output.console = original


class TestCreateConsole:
    """Tests for create_console function."""

    def test_no_color(self) -> None:
        assert output.create_console(no_color=True).no_color is True

    def test_respects_env_var(self) -> None:
        with patch.object(output, "_force_no_color", True):
            assert output.create_console().no_color is True


@pytest.mark.usefixtures("plain_console")
class TestMessages:
    """Tests for message helpers."""

    def test_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.success("Schema file generated successfully: user.schema.json")
        out = capsys.readouterr().out
        assert "✓" in out
        assert "Schema file generated successfully: user.schema.json" in out

    def test_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.error("Type Account not found in user.go")
        out = capsys.readouterr().out
        assert "✗" in out
        assert "Type Account not found in user.go" in out

    def test_markup_is_escaped(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Square brackets in messages (Go generics) are printed literally."""
        output.error("Page[T] has [bold]no[/bold] fields")
        assert "Page[T] has [bold]no[/bold] fields" in capsys.readouterr().out


class TestSetNoColor:
    """Tests for set_no_color."""

    def test_replaces_console(self, plain_console: Console) -> None:
        output.set_no_color(True)
        assert output.console is not plain_console
        assert output.console.no_color is True
