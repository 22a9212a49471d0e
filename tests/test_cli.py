"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from bezier_gap.cli import app
from bezier_gap.editor import DEFAULT_CURVE

UPPER = [{"pt": [0, 100]}, {"cp1": [0, 100], "cp2": [600, 100], "pt": [600, 100]}]
LOWER = [{"pt": [0, 200]}, {"cp1": [0, 200], "cp2": [600, 200], "pt": [600, 200]}]

runner = CliRunner()


@pytest.fixture
def curve_file(tmp_path: Path) -> Path:
    path = tmp_path / "curve.json"
    path.write_text(json.dumps(DEFAULT_CURVE))
    return path


@pytest.fixture
def pair_file(tmp_path: Path) -> Path:
    path = tmp_path / "pair.json"
    path.write_text(json.dumps({"curve1": UPPER, "curve2": LOWER}))
    return path


class TestResampleCommand:
    def test_json_single(self, curve_file: Path) -> None:
        result = runner.invoke(app, ["resample", str(curve_file), "-n", "5", "--json"])
        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert len(rows) == 5
        assert rows[0] == {"x": 0.0, "y": 0.0}

    def test_json_pair(self, pair_file: Path) -> None:
        result = runner.invoke(app, ["resample", str(pair_file), "--json"])
        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert len(rows) == 8
        assert rows[-1]["x"] == 1.0
        assert rows[0]["gap"] == 100

    def test_table(self, pair_file: Path) -> None:
        result = runner.invoke(app, ["resample", str(pair_file), "-n", "3"])
        assert result.exit_code == 0
        assert "3 samples" in result.stdout
        assert "gap" in result.stdout

    def test_invalid_sample_count(self, curve_file: Path) -> None:
        result = runner.invoke(app, ["resample", str(curve_file), "-n", "1"])
        assert result.exit_code == 1
        assert "Cannot resample" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["resample", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_malformed_file(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text('[{"cp1": [0, 0]}]')
        result = runner.invoke(app, ["resample", str(bad)])
        assert result.exit_code == 1
        assert "Invalid curve file" in result.output


class TestShowCommand:
    def test_show_pair(self, pair_file: Path) -> None:
        result = runner.invoke(app, ["show", str(pair_file)])
        assert result.exit_code == 0
        assert "Curve 1" in result.stdout
        assert "Curve 2" in result.stdout


class TestMoveCommand:
    def test_move_prints_description(self, curve_file: Path) -> None:
        result = runner.invoke(app, ["move", str(curve_file), "1", "pt", "310", "245"])
        assert result.exit_code == 0
        description = json.loads(result.stdout)
        assert description[1]["pt"] == [310.0, 245.0]
        assert description[1]["cp2"] == [110.0, 245.0]
        assert description[2]["cp1"] == [510.0, 245.0]

    def test_move_second_curve_to_file(self, pair_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "edited.json"
        result = runner.invoke(
            app,
            ["move", str(pair_file), "1", "cp2", "500", "250", "-c", "2", "-o", str(output)],
        )
        assert result.exit_code == 0
        edited = json.loads(output.read_text())
        assert edited["curve1"] == UPPER
        assert edited["curve2"][1]["cp2"] == [500.0, 250.0]

    def test_missing_point(self, curve_file: Path) -> None:
        result = runner.invoke(app, ["move", str(curve_file), "0", "cp1", "1", "1"])
        assert result.exit_code == 1
        assert "No such point" in result.output

    def test_missing_curve(self, curve_file: Path) -> None:
        result = runner.invoke(app, ["move", str(curve_file), "1", "pt", "1", "1", "-c", "2"])
        assert result.exit_code == 1


class TestPreviewCommand:
    def test_writes_png(self, pair_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "preview.png"
        result = runner.invoke(app, ["preview", str(pair_file), str(output)])
        assert result.exit_code == 0
        assert output.read_bytes().startswith(b"\x89PNG")
