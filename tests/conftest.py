"""
Pytest configuration for the testing API records.

Provides fixtures for:
- Wire-form payloads as the service returns them (including unknown keys)
- A fully populated matrix built through the typed setters
- Settings isolated from the caller's environment
"""

from __future__ import annotations

import copy
from typing import Any, Dict

import pytest

from scripts.generate_matrix import _generate_matrix
from testing_api.config import Settings, get_settings
from testing_api.model.test_matrix import TestMatrix

FINISHED_PAYLOAD: Dict[str, Any] = {
    "testMatrixId": "matrix-1a2b3c",
    "projectId": "proj-1",
    "state": "FINISHED",
    "timestamp": "2024-03-22T17:20:53.419Z",
    "clientInfo": {
        "name": "gcloud",
        "clientInfoDetails": [{"key": "version", "value": "470.0.0"}],
    },
    "environmentMatrix": {
        "androidDeviceList": {
            "androidDevices": [
                {
                    "androidModelId": "Pixel2",
                    "androidVersionId": "30",
                    "locale": "en",
                    "orientation": "portrait",
                }
            ]
        }
    },
    "resultStorage": {
        "googleCloudStorage": {"gcsPath": "gs://bucket/matrix-1a2b3c"},
        "toolResultsHistory": {"projectId": "proj-1", "historyId": "bh.1"},
        "resultsUrl": "https://console.example.com/matrices/1",
    },
    "testSpecification": {
        "testTimeout": "900s",
        "androidInstrumentationTest": {
            "appApk": {"gcsPath": "gs://bucket/app.apk"},
            "testApk": {"gcsPath": "gs://bucket/test.apk"},
            "testTargets": ["class com.example.FooTest"],
        },
    },
    "testExecutions": [
        {
            "id": "0",
            "matrixId": "matrix-1a2b3c",
            "projectId": "proj-1",
            "state": "FINISHED",
            "shard": {"shardIndex": 0, "numShards": 1},
            "environment": {
                "androidDevice": {
                    "androidModelId": "Pixel2",
                    "androidVersionId": "30",
                    "locale": "en",
                    "orientation": "portrait",
                }
            },
            "toolResultsStep": {"projectId": "proj-1", "historyId": "bh.1", "executionId": "1", "stepId": "2"},
        }
    ],
    "outcomeSummary": "SUCCESS",
}

INVALID_PAYLOAD: Dict[str, Any] = {
    "state": "INVALID",
    "invalidMatrixDetails": "bad env config",
    "projectId": "proj-1",
}


@pytest.fixture
def finished_payload() -> Dict[str, Any]:
    """
    A finished matrix in wire form with one top-level key the schema lacks.
    """
    return copy.deepcopy(FINISHED_PAYLOAD)


@pytest.fixture
def invalid_payload() -> Dict[str, Any]:
    return dict(INVALID_PAYLOAD)


@pytest.fixture
def generated_matrix() -> TestMatrix:
    """
    Deterministic matrix with two devices and two shards each.
    """
    return _generate_matrix(devices=2, shards=2, seed=7)


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """
    Clear settings-related environment variables and the settings cache.
    """
    for name in ("APP_ENV", "LOG_LEVEL", "LOG_JSON", "JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield Settings(_env_file=None)
    get_settings.cache_clear()
