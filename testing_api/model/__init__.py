"""
Record package for the testing API.

Exports the TestMatrix resource, the records it references and the
generic JSON base they share. Keep this package focused on data shape.
"""

from testing_api.model import states
from testing_api.model.generic import GenericJson
from testing_api.model.records import (
    AndroidDevice,
    AndroidDeviceList,
    AndroidInstrumentationTest,
    AndroidMatrix,
    AndroidRoboTest,
    ClientInfo,
    ClientInfoDetail,
    Environment,
    EnvironmentMatrix,
    EnvironmentVariable,
    FileReference,
    GoogleCloudStorage,
    IosDevice,
    IosDeviceList,
    IosXcTest,
    ResultStorage,
    Shard,
    TestDetails,
    TestExecution,
    TestSetup,
    TestSpecification,
    ToolResultsExecution,
    ToolResultsHistory,
    ToolResultsStep,
)
from testing_api.model.test_matrix import TestMatrix

__all__ = [
    "states",
    "GenericJson",
    "TestMatrix",
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
