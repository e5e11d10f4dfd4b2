"""
Smoke tests for the command line interface.

Each command runs in-process through typer's CliRunner against matrix
documents written to a temporary directory.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from testing_api.main import app

runner = CliRunner()


@pytest.fixture
def matrix_file(tmp_path: Path, finished_payload) -> Path:
    path = tmp_path / "matrix.json"
    path.write_text(json.dumps(finished_payload), encoding="utf-8")
    return path


def test_info_prints_settings(clean_settings) -> None:
    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    assert "json_indent=2" in result.output


def test_show_renders_matrix(matrix_file: Path) -> None:
    result = runner.invoke(app, ["show", str(matrix_file)])

    assert result.exit_code == 0
    assert "matrix-1a2b3c" in result.output
    assert "FINISHED" in result.output
    assert "Pixel2" in result.output
    assert "outcomeSummary" in result.output


def test_show_renders_invalid_details(tmp_path: Path, invalid_payload) -> None:
    path = tmp_path / "invalid.json"
    path.write_text(json.dumps(invalid_payload), encoding="utf-8")

    result = runner.invoke(app, ["show", str(path)])

    assert result.exit_code == 0
    assert "INVALID" in result.output
    assert "bad env config" in result.output
    assert "No test executions" in result.output


def test_normalize_round_trips_unknown_keys(matrix_file: Path, finished_payload) -> None:
    result = runner.invoke(app, ["normalize", str(matrix_file)])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == finished_payload


def test_normalize_writes_output_file(matrix_file: Path, tmp_path: Path, finished_payload) -> None:
    target = tmp_path / "out" / "normalized.json"

    result = runner.invoke(app, ["normalize", str(matrix_file), "--output", str(target)])

    assert result.exit_code == 0
    assert json.loads(target.read_text(encoding="utf-8")) == finished_payload


def test_invalid_document_exits_with_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('{"testExecutions": "nope"}', encoding="utf-8")

    result = runner.invoke(app, ["show", str(path)])

    assert result.exit_code == 1
    assert "Invalid test matrix" in result.output


def test_missing_file_exits_with_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["normalize", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_results_lists_result_files(tmp_path: Path) -> None:
    device_dir = tmp_path / "m1" / "shard_0" / "Pixel2-30-en"
    device_dir.mkdir(parents=True)
    (device_dir / "test_result_1.xml").write_text("<testsuite/>", encoding="utf-8")

    result = runner.invoke(app, ["results", str(tmp_path)])

    assert result.exit_code == 0
    assert "shard_0" in result.output
    assert "test_result_1.xml" in result.output


def test_results_requires_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ["results", str(tmp_path / "nope")])

    assert result.exit_code == 1
