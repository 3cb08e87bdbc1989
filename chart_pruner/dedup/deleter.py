"""
Deletion of superseded chart tiles.

Paths are removed in sorted order with Path.unlink. The first failure
stops the batch: remaining paths are left on disk and the error is raised
as ChartIOError.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import structlog

from chart_pruner.config.exceptions import ChartIOError

logger = structlog.get_logger(__name__)


class DeletionResult:
    """Files removed by a completed batch, in deletion order."""

    def __init__(self):
        self.deleted_files: list[Path] = []

    @property
    def deleted(self) -> int:
        return len(self.deleted_files)


class ChartDeleter:
    """Deletes every path it is given, stopping on the first error."""

    def delete_all(self, paths: Iterable[Path]) -> DeletionResult:
        """
        Delete paths in sorted order.

        Args:
            paths: Files to remove

        Returns:
            DeletionResult listing the removed files

        Raises:
            ChartIOError: On the first path that cannot be removed
        """
        ordered = sorted(paths)
        result = DeletionResult()

        for path in ordered:
            logger.info("chart_removing", file_path=str(path))
            try:
                path.unlink()
            except OSError as e:
                logger.error(
                    "chart_delete_failed",
                    file_path=str(path),
                    error=str(e),
                    remaining=len(ordered) - result.deleted - 1,
                )
                raise ChartIOError(e) from e

            result.deleted_files.append(path)

        return result
