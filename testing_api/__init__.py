"""
Testing API - Client-side records for the Cloud Testing REST API.

This package models the TestMatrix resource and the records it references
as JSON-backed objects that:

- Map snake_case attributes to the service's camelCase wire keys
- Preserve keys they do not declare across a decode/encode round trip
- Offer chained typed setters, a generic name-based `set`, and `clone`

Transport is left to the caller; these records are what goes over the wire.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from testing_api.config import Settings, get_settings
from testing_api.model import (
    ClientInfo,
    EnvironmentMatrix,
    GenericJson,
    ResultStorage,
    TestExecution,
    TestMatrix,
    TestSpecification,
    states,
)
from testing_api.results import ObjPath, artifact_patterns, find_result_files
from testing_api.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Records
    "GenericJson",
    "TestMatrix",
    "ClientInfo",
    "EnvironmentMatrix",
    "ResultStorage",
    "TestExecution",
    "TestSpecification",
    "states",
    # Result artifacts
    "ObjPath",
    "artifact_patterns",
    "find_result_files",
    # Logging
    "configure_logging",
    "get_logger",
]
