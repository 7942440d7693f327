"""Tests for the line-stacker command."""

import json
import logging
from typing import Iterator

import pytest

pytest.importorskip("typer")
pytest.importorskip("rich")

from rich.logging import RichHandler
from typer.testing import CliRunner

from line_stacker.cli.app import create_app, enable_debug_logging


runner = CliRunner()


@pytest.fixture(scope="module")
def app():
    return create_app()


class TestStackCommand:
    """Tests for `line-stacker stack`."""

    def test_two_glyphs(self, app) -> None:
        result = runner.invoke(app, ["stack", "┌", "┴"])
        assert result.exit_code == 0
        assert result.output == "┼\n"

    def test_many_glyphs(self, app) -> None:
        result = runner.invoke(app, ["stack", "╵", "╶", "╷", "╴"])
        assert result.exit_code == 0
        assert result.output.strip() == "┼"

    def test_blank(self, app) -> None:
        result = runner.invoke(app, ["stack", " ", "└"])
        assert result.exit_code == 0
        assert result.output == "└\n"

    def test_unsupported(self, app) -> None:
        result = runner.invoke(app, ["stack", "┌", "X"])
        assert result.exit_code == 1
        assert "Cannot stack" in result.output
        assert "'X'" in result.output

    def test_needs_two(self, app) -> None:
        result = runner.invoke(app, ["stack", "┌"])
        assert result.exit_code == 1
        assert "at least two" in result.output

    def test_unknown_style(self, app) -> None:
        result = runner.invoke(app, ["stack", "─", "│", "--style", "heavy"])
        assert result.exit_code == 1
        assert "Unknown line style" in result.output


class TestBitsCommand:
    """Tests for `line-stacker bits`."""

    @pytest.mark.parametrize("mask", ["11", "0b1011", "0xb"])
    def test_literal_forms(self, app, mask: str) -> None:
        result = runner.invoke(app, ["bits", mask])
        assert result.exit_code == 0
        assert result.output == "┴\n"

    def test_out_of_range(self, app) -> None:
        result = runner.invoke(app, ["bits", "16"])
        assert result.exit_code == 1
        assert "but got 16" in result.output

    def test_not_a_number(self, app) -> None:
        result = runner.invoke(app, ["bits", "cross"])
        assert result.exit_code == 1
        assert "Not an integer" in result.output


class TestCharCommand:
    """Tests for `line-stacker char`."""

    def test_json(self, app) -> None:
        result = runner.invoke(app, ["char", "┬", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "glyph": "┬",
            "mask": 14,
            "binary": "1110",
            "directions": ["right", "down", "left"],
        }

    def test_text(self, app) -> None:
        result = runner.invoke(app, ["char", "┼"])
        assert result.exit_code == 0
        assert "15" in result.output
        assert "0b1111" in result.output
        assert "up, right, down, left" in result.output

    def test_blank(self, app) -> None:
        result = runner.invoke(app, ["char", " ", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["directions"] == []

    def test_unsupported(self, app) -> None:
        result = runner.invoke(app, ["char", "═"])
        assert result.exit_code == 1
        assert "Unsupported glyph" in result.output


class TestTableCommand:
    """Tests for `line-stacker table`."""

    def test_lists_every_mask(self, app) -> None:
        result = runner.invoke(app, ["table"])
        assert result.exit_code == 0
        assert "light line style" in result.output
        for code_point in ("U+0020", "U+2575", "U+2534", "U+253C"):
            assert code_point in result.output

    def test_unknown_style(self, app) -> None:
        result = runner.invoke(app, ["table", "--style", "double"])
        assert result.exit_code == 1


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """The package logger, restored to its original level and handlers."""
    logger = logging.getLogger("line_stacker")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers


class TestVerbose:
    """Tests for `line-stacker --verbose`."""

    def test_attaches_rich_handler(self, app, package_logger: logging.Logger) -> None:
        result = runner.invoke(app, ["--verbose", "stack", "─", "│"])
        assert result.exit_code == 0
        assert package_logger.level == logging.DEBUG
        assert sum(isinstance(h, RichHandler) for h in package_logger.handlers) == 1

    def test_logs_failed_stack(
        self, app, package_logger: logging.Logger, caplog: pytest.LogCaptureFixture
    ) -> None:
        result = runner.invoke(app, ["--verbose", "stack", "┌", "X"])
        assert result.exit_code == 1
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
        assert any("Cannot stack 'X' on '┌'" in m for m in messages)

    def test_quiet_by_default(self, app, package_logger: logging.Logger) -> None:
        result = runner.invoke(app, ["stack", "─", "│"])
        assert result.exit_code == 0
        assert not any(isinstance(h, RichHandler) for h in package_logger.handlers)

    def test_handler_added_once(self, package_logger: logging.Logger) -> None:
        enable_debug_logging()
        enable_debug_logging()
        assert sum(isinstance(h, RichHandler) for h in package_logger.handlers) == 1
