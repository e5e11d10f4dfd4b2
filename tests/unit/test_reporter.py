from __future__ import annotations

import io
from pathlib import Path

from rich.console import Console

from testing_api.model.records import (
    AndroidDevice,
    Environment,
    GoogleCloudStorage,
    ResultStorage,
    TestExecution,
)
from testing_api.model.test_matrix import TestMatrix
from testing_api.reporter import describe_device, print_matrix, print_result_files


def _console() -> Console:
    return Console(file=io.StringIO(), width=160, color_system=None)


def test_print_matrix_shows_bracketed_values_verbatim() -> None:
    console = _console()
    matrix = (
        TestMatrix()
        .set_test_matrix_id("[bold]matrix-1")
        .set_project_id("[red]proj")
        .set_result_storage(ResultStorage(google_cloud_storage=GoogleCloudStorage(gcs_path="gs://b/[x]")))
        .set_test_executions([TestExecution(id="[dim]0")])
        .set("[italic]extra", 1)
    )

    print_matrix(matrix, console=console)
    output = console.file.getvalue()

    assert "[bold]matrix-1" in output
    assert "[red]proj" in output
    assert "gs://b/[x]" in output
    assert "[dim]0" in output
    assert "[italic]extra" in output


def test_print_result_files_shows_bracketed_names_verbatim(tmp_path: Path) -> None:
    console = _console()
    result = tmp_path / "[bold]m1" / "shard_0" / "[red]Pixel2" / "test_result_1.xml"

    print_result_files(tmp_path, [result], console=console)
    output = console.file.getvalue()

    assert "[bold]m1" in output
    assert "[red]Pixel2" in output


def test_describe_device() -> None:
    execution = TestExecution(
        environment=Environment(
            android_device=AndroidDevice(android_model_id="Pixel2", android_version_id="30", locale="en")
        )
    )

    assert describe_device(execution) == "Pixel2-30-en"
    assert describe_device(TestExecution()) == "-"
