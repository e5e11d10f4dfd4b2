"""
Sample test matrix generator.

Builds deterministic pseudo-random TestMatrix documents in wire form, the
way the service returns them once executions have been created. Useful for
exercising the CLI and as test fixtures.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Optional

import typer

from testing_api.model import states
from testing_api.model.records import (
    AndroidDevice,
    AndroidInstrumentationTest,
    AndroidMatrix,
    ClientInfo,
    Environment,
    EnvironmentMatrix,
    FileReference,
    GoogleCloudStorage,
    ResultStorage,
    Shard,
    TestExecution,
    TestSpecification,
    ToolResultsHistory,
)
from testing_api.model.test_matrix import TestMatrix

app = typer.Typer(help="Generate sample TestMatrix JSON documents.")

MODELS = ["Pixel2", "NexusLowRes", "oriole", "redfin"]
VERSIONS = ["28", "29", "30", "33"]
LOCALES = ["en", "de", "ja"]
ORIENTATIONS = ["portrait", "landscape"]
EXECUTION_STATES = [states.FINISHED, states.FINISHED, states.RUNNING, states.ERROR]


def _generate_matrix(devices: int, shards: int, seed: int) -> TestMatrix:
    rng = random.Random(seed)
    matrix_id = f"matrix-{rng.getrandbits(40):010x}"
    project_id = "sample-project"
    timestamp = "2024-03-22T17:20:53.419Z"

    models = rng.sample(MODELS, k=min(devices, len(MODELS)))
    android_matrix = AndroidMatrix(
        android_model_ids=models,
        android_version_ids=[rng.choice(VERSIONS)],
        locales=[rng.choice(LOCALES)],
        orientations=[rng.choice(ORIENTATIONS)],
    )
    spec = TestSpecification(
        test_timeout="900s",
        android_instrumentation_test=AndroidInstrumentationTest(
            app_apk=FileReference(gcs_path=f"gs://sample-bucket/{matrix_id}/app-debug.apk"),
            test_apk=FileReference(gcs_path=f"gs://sample-bucket/{matrix_id}/app-debug-androidTest.apk"),
        ),
    )

    executions = []
    for model in models:
        device = AndroidDevice(
            android_model_id=model,
            android_version_id=android_matrix.android_version_ids[0],
            locale=android_matrix.locales[0],
            orientation=android_matrix.orientations[0],
        )
        for index in range(shards):
            executions.append(
                TestExecution(
                    id=f"{len(executions)}",
                    matrix_id=matrix_id,
                    project_id=project_id,
                    shard=Shard(shard_index=index, num_shards=shards),
                    environment=Environment(android_device=device),
                    state=rng.choice(EXECUTION_STATES),
                    timestamp=timestamp,
                )
            )

    matrix_state = states.FINISHED if all(
        states.is_terminal(execution.state) for execution in executions
    ) else states.RUNNING

    return (
        TestMatrix()
        .set_client_info(ClientInfo(name="testing-api"))
        .set_environment_matrix(EnvironmentMatrix(android_matrix=android_matrix))
        .set_result_storage(
            ResultStorage(
                google_cloud_storage=GoogleCloudStorage(gcs_path=f"gs://sample-bucket/{matrix_id}"),
                tool_results_history=ToolResultsHistory(project_id=project_id, history_id="bh.sample"),
            )
        )
        .set_test_specification(spec)
        .set_test_matrix_id(matrix_id)
        .set_project_id(project_id)
        .set_state(matrix_state)
        .set_timestamp(timestamp)
        .set_test_executions(executions)
    )


@app.command()
def main(
    devices: int = typer.Option(2, "--devices", "-d", min=1, help="Number of device models."),
    shards: int = typer.Option(1, "--shards", "-s", min=1, help="Shards per device."),
    seed: int = typer.Option(42, "--seed", help="Deterministic RNG seed."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional output path (stdout if omitted).",
    ),
) -> None:
    """
    Generate one sample test matrix.
    """
    text = _generate_matrix(devices=devices, shards=shards, seed=seed).to_json(indent=2)
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    typer.echo(f"Wrote {output}")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
