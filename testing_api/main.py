from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from testing_api.config import get_settings
from testing_api.model.test_matrix import TestMatrix
from testing_api.reporter import print_matrix, print_result_files
from testing_api.results import find_result_files
from testing_api.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Inspect and normalize Cloud Testing API test matrices.")
logger = get_logger(__name__)


@app.callback()
def setup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """
    Configure logging from settings before any command runs.
    """
    settings = get_settings()
    configure_logging(level="DEBUG" if verbose else settings.log_level, json_logs=settings.log_json)


def _load_matrix(path: Path) -> TestMatrix:
    try:
        data = path.read_bytes()
    except OSError as exc:
        typer.echo(f"Cannot read {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    try:
        matrix = TestMatrix.from_json(data)
    except ValidationError as exc:
        typer.echo(f"Invalid test matrix in {path}:\n{exc}", err=True)
        raise typer.Exit(code=1) from exc
    logger.debug("Loaded test matrix", extra={"path": str(path), "matrix": matrix.test_matrix_id})
    return matrix


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} "
        f"log_json={settings.log_json} | json_indent={settings.json_indent}"
    )


@app.command()
def show(
    path: Path = typer.Argument(..., help="TestMatrix JSON file."),
) -> None:
    """
    Render a test matrix and its executions.
    """
    print_matrix(_load_matrix(path))


@app.command()
def normalize(
    path: Path = typer.Argument(..., help="TestMatrix JSON file."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write here instead of stdout.",
    ),
) -> None:
    """
    Re-serialize a test matrix in wire form, keeping unrecognized keys.
    """
    settings = get_settings()
    text = _load_matrix(path).to_json(indent=settings.json_indent or None)
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"Wrote {output}")


@app.command()
def results(
    root: Path = typer.Argument(..., help="Local copy of a matrix result storage."),
) -> None:
    """
    List JUnit result files under a downloaded results directory.
    """
    if not root.is_dir():
        typer.echo(f"Not a directory: {root}", err=True)
        raise typer.Exit(code=1)
    print_result_files(root, find_result_files(root))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
