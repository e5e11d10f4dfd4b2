from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from testing_api.model import states
from testing_api.model.records import TestExecution
from testing_api.model.test_matrix import TestMatrix
from testing_api.results import ObjPath

_STATE_STYLES = {
    states.FINISHED: "green",
    states.RUNNING: "cyan",
    states.PENDING: "blue",
    states.VALIDATING: "blue",
    states.CANCELLED: "yellow",
}


def _text(value: Optional[str]) -> str:
    return escape(str(value)) if value else "-"


def _styled_state(state: Optional[str]) -> str:
    if not state:
        return "[dim]-[/dim]"
    style = _STATE_STYLES.get(state, "red" if states.is_terminal(state) else "white")
    return f"[{style}]{escape(state)}[/{style}]"


def describe_device(execution: TestExecution) -> str:
    """
    One-line device summary, e.g. ``Pixel2-30-en-portrait``.
    """
    environment = execution.environment
    if environment is None:
        return "-"
    if environment.android_device is not None:
        device = environment.android_device
        parts = [device.android_model_id, device.android_version_id, device.locale, device.orientation]
    elif environment.ios_device is not None:
        device = environment.ios_device
        parts = [device.ios_model_id, device.ios_version_id, device.locale, device.orientation]
    else:
        return "-"
    return "-".join(part for part in parts if part) or "-"


def print_matrix(matrix: TestMatrix, console: Optional[Console] = None) -> None:
    """
    Render a matrix summary and its executions as rich tables.
    """
    console = console or Console()

    summary = Table(title="Test Matrix", box=box.ROUNDED, show_header=False)
    summary.add_column("Field", style="cyan", no_wrap=True)
    summary.add_column("Value")

    storage = matrix.result_storage
    gcs_path = None
    if storage is not None and storage.google_cloud_storage is not None:
        gcs_path = storage.google_cloud_storage.gcs_path

    summary.add_row("Matrix", _text(matrix.test_matrix_id))
    summary.add_row("Project", _text(matrix.project_id))
    summary.add_row("State", _styled_state(matrix.state))
    summary.add_row("Created", _text(matrix.timestamp))
    if matrix.invalid_matrix_details:
        summary.add_row("Invalid details", f"[red]{escape(matrix.invalid_matrix_details)}[/red]")
    summary.add_row("Results", _text(gcs_path))
    executions = matrix.test_executions or []
    summary.add_row("Executions", str(len(executions)))
    unknown = matrix.unknown_fields()
    if unknown:
        summary.add_row("Extra keys", escape(", ".join(sorted(unknown))))
    console.print(summary)

    if not executions:
        console.print("[yellow]No test executions.[/yellow]")
        return

    table = Table(title="Test Executions", box=box.ROUNDED)
    table.add_column("Execution", style="cyan", no_wrap=True)
    table.add_column("State")
    table.add_column("Device", style="magenta")
    table.add_column("Shard", justify="right")

    for execution in executions:
        shard = "-"
        if execution.shard is not None and execution.shard.shard_index is not None:
            shard = str(execution.shard.shard_index)
        table.add_row(
            _text(execution.id),
            _styled_state(execution.state),
            escape(describe_device(execution)),
            shard,
        )

    console.print(table)


def print_result_files(root: Path, paths: Sequence[Path], console: Optional[Console] = None) -> None:
    """
    Render result files found under `root`, split into matrix/shard/device.
    """
    console = console or Console()

    if not paths:
        console.print("[yellow]No result files found.[/yellow]")
        return

    table = Table(title=f"Result files under {escape(str(root))}", box=box.ROUNDED)
    table.add_column("Matrix", style="cyan")
    table.add_column("Shard", style="blue")
    table.add_column("Device", style="magenta")
    table.add_column("File")

    skipped: List[Path] = []
    for path in paths:
        try:
            parsed = ObjPath.parse(path.relative_to(root).as_posix())
        except ValueError:
            skipped.append(path)
            continue
        table.add_row(
            escape(parsed.obj_name),
            escape(parsed.shard_name),
            escape(parsed.device_name),
            escape(parsed.file_name),
        )

    console.print(table)
    for path in skipped:
        console.print(f"[dim]Skipped {escape(str(path))} (not under matrix/shard/device)[/dim]")
