"""
Helpers for the result artifacts a matrix writes to its result storage.

Result objects are laid out as ``<matrix folder>/<shard>/<device>/.../<file>``
below the storage root; JUnit reports are named ``test_result_<n>.xml``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Pattern

from testing_api.utils.logging import get_logger

logger = get_logger(__name__)

TEST_RESULT_PATTERN: Pattern[str] = re.compile(r".*test_result_\d+\.xml$")


def artifact_patterns(files_to_download: Iterable[str] = ()) -> List[Pattern[str]]:
    """
    Patterns selecting the objects to download for a matrix: JUnit results
    always, plus one compiled pattern per user-supplied regex.
    """
    return [TEST_RESULT_PATTERN] + [re.compile(pattern) for pattern in files_to_download]


@dataclass(frozen=True)
class ObjPath:
    """
    A result object path split into its components.
    """

    file_name: str
    obj_name: str
    shard_name: str
    device_name: str

    @classmethod
    def parse(cls, path: str) -> "ObjPath":
        """
        Parse ``matrix/shard/device/.../file``. A leading ``/`` is ignored.
        With only ``matrix/shard/file`` the device name is the file name.

        Raises
        ------
        ValueError
            If the path has fewer than three components.
        """
        parts = PurePosixPath(path.replace("\\", "/")).parts
        if parts and parts[0] == "/":
            parts = parts[1:]
        if len(parts) < 3:
            raise ValueError(f"Not a result object path: {path!r}")
        return cls(
            file_name=parts[-1],
            obj_name=parts[0],
            shard_name=parts[1],
            device_name=parts[2],
        )


def find_result_files(root: Path) -> List[Path]:
    """
    Recursively collect JUnit result files under `root`, sorted by path.
    """
    matches = sorted(
        path
        for path in Path(root).rglob("*")
        if path.is_file() and TEST_RESULT_PATTERN.match(path.name)
    )
    logger.debug("Found result files", extra={"root": str(root), "count": len(matches)})
    return matches


__all__ = ["ObjPath", "TEST_RESULT_PATTERN", "artifact_patterns", "find_result_files"]
