"""End-to-end tests that run the CLI and verify the written SVG."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from tracksvg.cli.app import app

runner = CliRunner()

SQUARE_CSV = "0,0\n100,0\n100,100\n0,100\n"


@pytest.fixture
def square_csv(tmp_path: Path) -> Path:
    path = tmp_path / "points.csv"
    path.write_text(SQUARE_CSV)
    return path


class TestEndToEndOutput:
    """Run the command line and inspect the output file."""

    def test_square_track(self, square_csv, tmp_path):
        """The square renders outer edge, surface and centerline."""
        output = tmp_path / "track.svg"
        result = runner.invoke(app, [str(square_csv), "-o", str(output), "-q"])

        assert result.exit_code == 0, result.output
        svg = output.read_text(encoding="utf-8")
        body = [line for line in svg.splitlines() if line.startswith(("<line", "<path"))]

        assert len(body) == 24
        assert body[0] == (
            '<line x1="35" y1="125" x2="115" y2="125" stroke="black" stroke-width="5" />'
        )
        assert body[1] == (
            '<path d="M 115 125 q 10 0 10 -10" fill="none" stroke="black" stroke-width="5" />'
        )
        assert body[8].endswith('stroke="white" stroke-width="4" />')
        assert body[16].endswith(
            'stroke="red" stroke-dasharray="0.5,2" stroke-width="0.5" />'
        )
        assert '<svg width="500" height="500" version="1.1"' in svg

    def test_options(self, square_csv, tmp_path):
        """Radius, padding and canvas options reach the output."""
        output = tmp_path / "track.svg"
        result = runner.invoke(
            app,
            [
                str(square_csv),
                "-o",
                str(output),
                "--radius",
                "20",
                "--padding",
                "5",
                "--auto-size",
                "-q",
            ],
        )

        assert result.exit_code == 0, result.output
        svg = output.read_text(encoding="utf-8")
        assert '<svg width="110" height="110"' in svg
        assert '<line x1="25" y1="105" x2="85" y2="105"' in svg

    def test_repeatable_output(self, square_csv, tmp_path):
        """Two runs over the same input write identical files."""
        first = tmp_path / "a.svg"
        second = tmp_path / "b.svg"
        runner.invoke(app, [str(square_csv), "-o", str(first), "-q"])
        runner.invoke(app, [str(square_csv), "-o", str(second), "-q"])
        assert first.read_text() == second.read_text()

    def test_summary_output(self, square_csv, tmp_path):
        """Normal mode prints a completion summary."""
        output = tmp_path / "track.svg"
        result = runner.invoke(app, [str(square_csv), "-o", str(output), "--show-points"])
        assert result.exit_code == 0, result.output
        assert "Complete" in result.output
        assert "Waypoints" in result.output

    def test_diagonal_warned_once(self, tmp_path):
        """Default mode reports a diagonal segment once, without log records."""
        csv = tmp_path / "points.csv"
        csv.write_text("0,0\n10,0\n10,10\n")
        output = tmp_path / "track.svg"
        result = runner.invoke(app, [str(csv), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert result.output.count("not axis-aligned") == 1
        assert '"event"' not in result.output

    def test_skipped_lines_reported(self, tmp_path):
        """Skipped records are listed in the console, not as log records."""
        csv = tmp_path / "points.csv"
        csv.write_text("x,y\n" + SQUARE_CSV)
        output = tmp_path / "track.svg"
        result = runner.invoke(app, [str(csv), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "Skipped line 1: x,y" in result.output
        assert "Skipping malformed waypoint" not in result.output

    def test_log_level_case_insensitive(self, square_csv, tmp_path):
        """Level names are accepted in any case."""
        output = tmp_path / "track.svg"
        result = runner.invoke(
            app, [str(square_csv), "-o", str(output), "--log-level", "debug", "-q"]
        )
        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_interactive(self, tmp_path):
        """Waypoints can be typed instead of read from a file."""
        output = tmp_path / "track.svg"
        result = runner.invoke(
            app,
            ["--interactive", "-o", str(output), "-q"],
            input="4\n0 0\n100 0\n100 100\n0 100\n",
        )
        assert result.exit_code == 0, result.output
        assert output.read_text().count("<path ") == 12


class TestErrors:
    """Failure paths exit with status 1 and write nothing."""

    def test_missing_input(self, tmp_path):
        """A missing CSV file is reported."""
        output = tmp_path / "track.svg"
        result = runner.invoke(app, [str(tmp_path / "nope.csv"), "-o", str(output)])
        assert result.exit_code == 1
        assert not output.exists()

    def test_two_points(self, tmp_path):
        """A two-point loop is rejected."""
        csv = tmp_path / "points.csv"
        csv.write_text("0,0\n10,0\n")
        output = tmp_path / "track.svg"
        result = runner.invoke(app, [str(csv), "-o", str(output), "-q"])
        assert result.exit_code == 1
        assert not output.exists()

    def test_strict_diagonal(self, tmp_path):
        """--strict rejects diagonal segments."""
        csv = tmp_path / "points.csv"
        csv.write_text("0,0\n10,0\n10,10\n")
        output = tmp_path / "track.svg"
        result = runner.invoke(app, [str(csv), "-o", str(output), "--strict", "-q"])
        assert result.exit_code == 1
        assert not output.exists()

    def test_verbose_and_quiet(self, square_csv):
        """--verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, [str(square_csv), "-v", "-q"])
        assert result.exit_code == 1

    def test_unknown_log_level(self, square_csv, tmp_path):
        """An unknown --log-level is reported instead of crashing."""
        output = tmp_path / "track.svg"
        result = runner.invoke(
            app, [str(square_csv), "-o", str(output), "--log-level", "LOUD"]
        )
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Invalid log level" in result.output
        assert not output.exists()

    def test_version(self):
        """--version prints the version and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "tracksvg" in result.output
