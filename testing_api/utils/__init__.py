"""
Utilities package for the testing API client models.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of record definitions.
"""

from testing_api.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
]
