"""
Lifecycle states reported by the service for matrices and executions.

`TestMatrix.state` and `TestExecution.state` stay plain strings; these
constants name the values the service is known to send.
"""
from __future__ import annotations

from typing import Optional

TEST_STATE_UNSPECIFIED = "TEST_STATE_UNSPECIFIED"
VALIDATING = "VALIDATING"
PENDING = "PENDING"
RUNNING = "RUNNING"
FINISHED = "FINISHED"
ERROR = "ERROR"
UNSUPPORTED_ENVIRONMENT = "UNSUPPORTED_ENVIRONMENT"
INCOMPATIBLE_ENVIRONMENT = "INCOMPATIBLE_ENVIRONMENT"
INCOMPATIBLE_ARCHITECTURE = "INCOMPATIBLE_ARCHITECTURE"
CANCELLED = "CANCELLED"
INVALID = "INVALID"

# No further transitions happen once one of these is reported.
TERMINAL_STATES = frozenset(
    {
        FINISHED,
        ERROR,
        UNSUPPORTED_ENVIRONMENT,
        INCOMPATIBLE_ENVIRONMENT,
        INCOMPATIBLE_ARCHITECTURE,
        CANCELLED,
        INVALID,
    }
)


def is_terminal(state: Optional[str]) -> bool:
    return state in TERMINAL_STATES


__all__ = [
    "TEST_STATE_UNSPECIFIED",
    "VALIDATING",
    "PENDING",
    "RUNNING",
    "FINISHED",
    "ERROR",
    "UNSUPPORTED_ENVIRONMENT",
    "INCOMPATIBLE_ENVIRONMENT",
    "INCOMPATIBLE_ARCHITECTURE",
    "CANCELLED",
    "INVALID",
    "TERMINAL_STATES",
    "is_terminal",
]
