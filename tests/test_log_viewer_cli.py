"""Tests for the Log Viewer CLI and shared helpers."""

import json
from unittest.mock import patch

import click
import pytest
from click.testing import CliRunner

from shared.cli import handle_errors
from tools.log_viewer.cli import main
from tools.log_viewer.config import OutputFormat, ViewerConfig

LOG_TEXT = (
    "[2023-05-01 10:20:30] local.ERROR: Boom\n"
    "#0 {main}\n"
    "[2023-05-01 10:21:00] local.INFO: Hello\n"
)


@pytest.fixture
def runner():
    return CliRunner()


class TestViewerConfig:
    """Test ViewerConfig dataclass."""

    def test_defaults(self):
        """Test default configuration."""
        config = ViewerConfig()
        assert config.strict is False
        assert config.levels == []
        assert config.limit == 50
        assert config.output == OutputFormat.TABLE

    def test_output_coerced(self):
        """Test that string output formats are converted."""
        assert ViewerConfig(output="json").output == OutputFormat.JSON

    def test_invalid_limit(self):
        """Test that a non-positive limit is rejected."""
        with pytest.raises(ValueError, match="limit must be positive"):
            ViewerConfig(limit=0)


class TestHandleErrors:
    """Test handle_errors decorator."""

    def test_exception_exits_with_one(self):
        """Test that errors become exit code 1."""

        @handle_errors
        def boom():
            raise RuntimeError("bad")

        with pytest.raises(SystemExit) as exc_info:
            boom()
        assert exc_info.value.code == 1

    def test_keyboard_interrupt(self):
        """Test that Ctrl-C exits with 130."""

        @handle_errors
        def interrupted():
            raise KeyboardInterrupt

        with pytest.raises(SystemExit) as exc_info:
            interrupted()
        assert exc_info.value.code == 130

    def test_click_exceptions_pass_through(self):
        """Test that click's own exceptions are not swallowed."""

        @handle_errors
        def usage():
            raise click.UsageError("wrong")

        with pytest.raises(click.UsageError):
            usage()


class TestCli:
    """Test the log-viewer command."""

    def test_table_output(self, runner):
        """Test default table output."""
        result = runner.invoke(main, [], input=LOG_TEXT)

        assert result.exit_code == 0
        assert "Boom" in result.output
        assert "Hello" in result.output

    def test_json_output(self, runner):
        """Test JSON export."""
        result = runner.invoke(main, ["--output", "json"], input=LOG_TEXT)

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total"] == 2
        assert data["entries"][0] == {
            "level": "error",
            "datetime": "2023-05-01 10:20:30",
            "header": "Boom",
            "stack": "\n#0 {main}\n",
        }

    def test_json_level_filter_and_stats(self, runner):
        """Test level filtering with statistics in JSON."""
        result = runner.invoke(main, ["-o", "json", "-l", "ERROR", "--stats"], input=LOG_TEXT)

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total"] == 1
        assert data["entries"][0]["header"] == "Boom"
        assert data["statistics"]["all"] == 2
        assert data["statistics"]["info"] == 1

    def test_reads_file(self, runner, tmp_path):
        """Test reading a log file argument."""
        log_file = tmp_path / "laravel.log"
        log_file.write_text(LOG_TEXT, encoding="utf-8")

        result = runner.invoke(main, [str(log_file), "-o", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["total"] == 2

    def test_empty_input(self, runner):
        """Test input without records."""
        result = runner.invoke(main, [], input="")
        assert result.exit_code == 0

    def test_strict_fails_on_malformed(self, runner):
        """Test that --strict aborts on a bad timestamp."""
        text = LOG_TEXT + "[2023-13-45 10:20:30] local.ERROR: Bad\n"
        result = runner.invoke(main, ["--strict"], input=text)

        assert result.exit_code == 1

    def test_lenient_skips_malformed(self, runner):
        """Test that malformed records are skipped without --strict."""
        text = LOG_TEXT + "[2023-13-45 10:20:30] local.ERROR: Bad\n"

        with patch("tools.log_viewer.cli.display_entries") as mock_display:
            result = runner.invoke(main, [], input=text)

        assert result.exit_code == 0
        shown = mock_display.call_args[0][0]
        assert [e.header for e in shown] == ["Boom", "Hello"]

    def test_invalid_limit(self, runner):
        """Test that click rejects a zero limit."""
        result = runner.invoke(main, ["--limit", "0"], input=LOG_TEXT)
        assert result.exit_code == 2
