"""
Recursive chart tile scanner with newest-date deduplication.

Features:
- Depth-first walk, directories listed in name order
- Every non-directory entry (symlinks included) is parsed as a tile
- Newest date wins per group key, first-seen wins on ties
- Names with too few fields are logged and skipped
- Any OSError aborts the walk as ChartIOError
"""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from chart_pruner.config.exceptions import ChartIOError
from chart_pruner.dedup.models import ChartFile, KeepSet, ScanStats
from chart_pruner.dedup.parser import parse_chart_path

logger = structlog.get_logger(__name__)


class ChartScanner:
    """
    Walks a chart tree and splits tiles into keep/remove sets.

    The scanner owns both accumulators; each call to scan_entry() or
    consider() updates them in place.
    """

    def __init__(self):
        self.to_keep = KeepSet()
        self.to_remove: set[Path] = set()
        self.stats = ScanStats()

    def scan_root(self, root: Path) -> None:
        """
        Scan every top-level entry under root.

        Raises:
            ChartIOError: If root or any nested entry cannot be read
            DateFormatError: If a tile carries a malformed date token
        """
        logger.info("chart_scan_started", root_path=str(root))
        for entry in _list_dir(root):
            self.scan_entry(entry)
        logger.info(
            "chart_scan_completed",
            total_seen=self.stats.total_seen,
            total_skipped=self.stats.total_skipped,
            to_keep=len(self.to_keep),
            to_remove=len(self.to_remove),
        )

    def scan_entry(self, entry: os.DirEntry) -> None:
        """Recurse into a directory entry or classify a file entry."""
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            raise ChartIOError(e) from e

        if is_dir:
            for child in _list_dir(Path(entry.path)):
                self.scan_entry(child)
            return

        self.stats.total_seen += 1
        path = Path(entry.path)
        parsed = parse_chart_path(path)
        if parsed is None:
            self.stats.total_skipped += 1
            self.stats.skipped_paths.append(path)
            logger.error("chart_path_unparseable", file_path=str(path))
            return

        group_key, tile_date = parsed
        self.consider(ChartFile(group_key=group_key, date=tile_date, full_path=path))

    def consider(self, found: ChartFile) -> None:
        """
        Decide whether a tile replaces the one kept in its slot.

        A strictly newer date replaces the kept file; an equal or older
        date sends the new file to the remove set.
        """
        old = self.to_keep.take(found)
        if old is None:
            logger.debug("chart_found_new", chart=str(found))
            self.to_keep.insert(found)
            return

        if old.date < found.date:
            logger.debug("chart_replacing_existing", existing=str(old), replacement=str(found))
            self.to_keep.insert(found)
            self.to_remove.add(old.full_path)
        else:
            logger.debug("chart_not_replacing_existing", existing=str(old), candidate=str(found))
            self.to_remove.add(found.full_path)
            self.to_keep.insert(old)


def _list_dir(directory: Path) -> list[os.DirEntry]:
    """List a directory sorted by name, wrapping OS errors."""
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise ChartIOError(e) from e
