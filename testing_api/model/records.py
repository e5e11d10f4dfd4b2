"""
Records referenced by `TestMatrix`.

Field sets follow the Cloud Testing API v1 resources. Like every
`GenericJson`, each record keeps keys it does not declare, so fields the
service adds later still survive a round trip.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from testing_api.model.generic import GenericJson


class ClientInfoDetail(GenericJson):
    key: Optional[str] = Field(None, description="Detail name.")
    value: Optional[str] = Field(None, description="Detail value.")


class ClientInfo(GenericJson):
    """
    Information about the client that invoked the test.
    """

    name: Optional[str] = Field(None, description="Client name, such as gcloud.")
    client_info_details: Optional[List[ClientInfoDetail]] = Field(
        None, description="Free-form key/value pairs describing the client."
    )


class AndroidDevice(GenericJson):
    android_model_id: Optional[str] = Field(None, description="Device model id.")
    android_version_id: Optional[str] = Field(None, description="OS version id.")
    locale: Optional[str] = Field(None, description="Locale, e.g. en_US.")
    orientation: Optional[str] = Field(None, description="portrait or landscape.")


class IosDevice(GenericJson):
    ios_model_id: Optional[str] = Field(None, description="Device model id.")
    ios_version_id: Optional[str] = Field(None, description="OS version id.")
    locale: Optional[str] = Field(None, description="Locale, e.g. en_US.")
    orientation: Optional[str] = Field(None, description="portrait or landscape.")


class AndroidMatrix(GenericJson):
    """
    Cross-product of Android axes; every combination becomes one execution.
    """

    android_model_ids: Optional[List[str]] = None
    android_version_ids: Optional[List[str]] = None
    locales: Optional[List[str]] = None
    orientations: Optional[List[str]] = None


class AndroidDeviceList(GenericJson):
    android_devices: Optional[List[AndroidDevice]] = None


class IosDeviceList(GenericJson):
    ios_devices: Optional[List[IosDevice]] = None


class EnvironmentMatrix(GenericJson):
    """
    Device and OS axes a matrix runs against. The service expects exactly one
    of the three members to be set.
    """

    android_matrix: Optional[AndroidMatrix] = None
    android_device_list: Optional[AndroidDeviceList] = None
    ios_device_list: Optional[IosDeviceList] = None


class GoogleCloudStorage(GenericJson):
    gcs_path: Optional[str] = Field(None, description="gs:// path results are written under.")


class ToolResultsHistory(GenericJson):
    project_id: Optional[str] = None
    history_id: Optional[str] = None


class ToolResultsExecution(GenericJson):
    project_id: Optional[str] = None
    history_id: Optional[str] = None
    execution_id: Optional[str] = None


class ToolResultsStep(GenericJson):
    project_id: Optional[str] = None
    history_id: Optional[str] = None
    execution_id: Optional[str] = None
    step_id: Optional[str] = None


class ResultStorage(GenericJson):
    """
    Where the service writes test results.
    """

    google_cloud_storage: Optional[GoogleCloudStorage] = None
    tool_results_history: Optional[ToolResultsHistory] = None
    tool_results_execution: Optional[ToolResultsExecution] = Field(
        None, description="Output only. Execution the results are recorded under."
    )
    results_url: Optional[str] = Field(None, description="Output only. Console URL.")


class FileReference(GenericJson):
    gcs_path: Optional[str] = None


class EnvironmentVariable(GenericJson):
    key: Optional[str] = None
    value: Optional[str] = None


class TestSetup(GenericJson):
    directories_to_pull: Optional[List[str]] = None
    environment_variables: Optional[List[EnvironmentVariable]] = None
    network_profile: Optional[str] = None


class AndroidInstrumentationTest(GenericJson):
    app_apk: Optional[FileReference] = None
    test_apk: Optional[FileReference] = None
    app_package_id: Optional[str] = None
    test_package_id: Optional[str] = None
    test_runner_class: Optional[str] = None
    test_targets: Optional[List[str]] = None
    orchestrator_option: Optional[str] = None


class AndroidRoboTest(GenericJson):
    app_apk: Optional[FileReference] = None
    app_package_id: Optional[str] = None
    max_depth: Optional[int] = None
    max_steps: Optional[int] = None


class IosXcTest(GenericJson):
    tests_zip: Optional[FileReference] = None
    xctestrun: Optional[FileReference] = None
    xcode_version: Optional[str] = None
    app_bundle_id: Optional[str] = None


class TestSpecification(GenericJson):
    """
    How to run a test: the test type, its inputs and the run settings.
    """

    test_timeout: Optional[str] = Field(None, description="Duration such as '900s'.")
    disable_video_recording: Optional[bool] = None
    disable_performance_metrics: Optional[bool] = None
    test_setup: Optional[TestSetup] = None
    android_instrumentation_test: Optional[AndroidInstrumentationTest] = None
    android_robo_test: Optional[AndroidRoboTest] = None
    ios_xc_test: Optional[IosXcTest] = None


class Shard(GenericJson):
    shard_index: Optional[int] = None
    num_shards: Optional[int] = None


class Environment(GenericJson):
    android_device: Optional[AndroidDevice] = None
    ios_device: Optional[IosDevice] = None


class TestDetails(GenericJson):
    progress_messages: Optional[List[str]] = None
    error_message: Optional[str] = None


class TestExecution(GenericJson):
    """
    A single test run on one device/OS combination of a matrix.
    All fields are set by the service.
    """

    id: Optional[str] = None
    matrix_id: Optional[str] = None
    project_id: Optional[str] = None
    test_specification: Optional[TestSpecification] = None
    shard: Optional[Shard] = None
    environment: Optional[Environment] = None
    state: Optional[str] = None
    tool_results_step: Optional[ToolResultsStep] = None
    timestamp: Optional[str] = None
    test_details: Optional[TestDetails] = None


__all__ = [
    "AndroidDevice",
    "AndroidDeviceList",
    "AndroidInstrumentationTest",
    "AndroidMatrix",
    "AndroidRoboTest",
    "ClientInfo",
    "ClientInfoDetail",
    "Environment",
    "EnvironmentMatrix",
    "EnvironmentVariable",
    "FileReference",
    "GoogleCloudStorage",
    "IosDevice",
    "IosDeviceList",
    "IosXcTest",
    "ResultStorage",
    "Shard",
    "TestDetails",
    "TestExecution",
    "TestSetup",
    "TestSpecification",
    "ToolResultsExecution",
    "ToolResultsHistory",
    "ToolResultsStep",
]
