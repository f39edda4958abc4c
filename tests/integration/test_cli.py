"""Integration tests for the joinery CLI.

These tests run the typer app end to end for the panes, sash, layout and
validate commands, checking output and exit codes.
"""

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from joinery.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestPanesCommand:
    """Tests for the panes command."""

    def test_text_output(self, runner: CliRunner) -> None:
        """A single mullion prints two panes."""
        result = runner.invoke(
            app,
            ["panes", "-w", "1200", "-h", "1200", "--mullion", "600", "--mullion-thickness", "80"],
        )

        assert result.exit_code == 0
        assert "0-0" in result.output
        assert "0-1" in result.output
        assert "Dividers:" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        """JSON output can be parsed."""
        result = runner.invoke(
            app,
            [
                "panes",
                "--width", "1000",
                "--height", "1000",
                "--mullion", "500",
                "--transom", "500",
                "--mullion-thickness", "100",
                "--transom-thickness", "100",
                "--format", "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [p["id"] for p in data["panes"]] == ["0-0", "0-1", "1-0", "1-1"]

    def test_repeated_mullions(self, runner: CliRunner) -> None:
        """--mullion can be given more than once."""
        result = runner.invoke(
            app,
            ["panes", "-w", "900", "-h", "600", "-m", "300", "-m", "600", "-f", "json"],
        )

        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["panes"]) == 3

    def test_invalid_size(self, runner: CliRunner) -> None:
        """A non-positive width exits 1."""
        result = runner.invoke(app, ["panes", "-w", "0", "-h", "1000"])

        assert result.exit_code == 1
        assert "Width must be positive" in result.output

    def test_unknown_format(self, runner: CliRunner) -> None:
        """Unknown output formats exit 1."""
        result = runner.invoke(app, ["panes", "-w", "100", "-h", "100", "-f", "xml"])

        assert result.exit_code == 1
        assert "Unknown format" in result.output


class TestSashCommand:
    """Tests for the sash command."""

    def test_bars(self, runner: CliRunner) -> None:
        """Bar counts split the glass evenly."""
        result = runner.invoke(
            app,
            [
                "sash",
                "-w", "1000",
                "-h", "500",
                "--vertical-bars", "1",
                "--bar-thickness", "20",
                "-f", "json",
            ],
        )

        assert result.exit_code == 0
        panes = json.loads(result.stdout)["panes"]
        assert [p["width"] for p in panes] == [490, 490]
        assert [p["x"] for p in panes] == [0, 510]


class TestLayoutCommand:
    """Tests for the layout command."""

    def test_text_summary(self, runner: CliRunner, configs_path: Path) -> None:
        """The summary lists the glazed areas."""
        result = runner.invoke(app, ["layout", str(configs_path / "casement_two_lights.json")])

        assert result.exit_code == 0
        assert "ITEM W1 (casement)" in result.output
        assert "A-0-1" in result.output

    def test_json_to_file(
        self, runner: CliRunner, configs_path: Path, tmp_path: Path
    ) -> None:
        """--output writes the formatted output to a file."""
        out = tmp_path / "sash.json"

        result = runner.invoke(
            app,
            [
                "layout",
                str(configs_path / "sash_window.json"),
                "--format", "json",
                "--output", str(out),
            ],
        )

        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        top = data["elevation"]["instances"][0]["glazed_areas"][0]
        assert top["key"] == "A-top"
        assert len(top["panes"]) == 2

    def test_export_formats(
        self, runner: CliRunner, configs_path: Path, tmp_path: Path
    ) -> None:
        """--output-formats exports through the registry."""
        result = runner.invoke(
            app,
            [
                "layout",
                str(configs_path / "casement_two_lights.json"),
                "--output-formats", "all",
                "--output-dir", str(tmp_path),
            ],
        )

        assert result.exit_code == 0
        assert (tmp_path / "W1_json.json").exists()
        assert (tmp_path / "W1_glass.csv").exists()
        assert "Exported files:" in result.output

    def test_unknown_export_format(
        self, runner: CliRunner, configs_path: Path, tmp_path: Path
    ) -> None:
        """Unregistered export formats exit 1."""
        result = runner.invoke(
            app,
            [
                "layout",
                str(configs_path / "casement_two_lights.json"),
                "--output-formats", "dxf",
                "--output-dir", str(tmp_path),
            ],
        )

        assert result.exit_code == 1
        assert "Unknown formats: dxf" in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """A missing configuration exits 1."""
        result = runner.invoke(app, ["layout", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_geometry_error(self, runner: CliRunner, configs_path: Path) -> None:
        """Blocking geometry errors exit 1."""
        result = runner.invoke(app, ["layout", str(configs_path / "no_opening.json")])

        assert result.exit_code == 1
        assert "Frame jambs leave no opening" in result.output

    def test_verbose_flag(
        self, runner: CliRunner, configs_path: Path, tmp_path: Path
    ) -> None:
        """--verbose with --log-file records debug messages."""
        log_file = tmp_path / "joinery.log"
        logger = logging.getLogger("joinery")

        try:
            result = runner.invoke(
                app,
                [
                    "--verbose",
                    "--log-file", str(log_file),
                    "layout",
                    str(configs_path / "casement_two_lights.json"),
                ],
            )
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

        assert result.exit_code == 0
        assert "laid out" in log_file.read_text(encoding="utf-8")
