"""
Chart Pruner - entry point.

Scans the configured chart root, deletes every superseded tile and reports
how many files were kept and removed. Fatal errors are printed in their
display form and turn into a non-zero exit status.
"""

from __future__ import annotations

import sys
from typing import Optional

import structlog

from chart_pruner.config.exceptions import ChartPrunerError
from chart_pruner.config.logging import configure_logging
from chart_pruner.config.settings import PrunerConfig, load_logging_settings
from chart_pruner.dedup.deleter import ChartDeleter
from chart_pruner.dedup.models import PruneSummary
from chart_pruner.dedup.scanner import ChartScanner

logger = structlog.get_logger(__name__)


def run_pruner(config: PrunerConfig) -> PruneSummary:
    """
    Scan config.root_path and delete superseded tiles.

    Nothing is deleted unless the whole scan succeeds.

    Raises:
        ChartIOError: On any listing, inspection or deletion failure
        DateFormatError: On a malformed date token
    """
    scanner = ChartScanner()
    scanner.scan_root(config.root_path)

    deletion = ChartDeleter().delete_all(scanner.to_remove)

    summary = PruneSummary(
        kept=len(scanner.to_keep),
        removed=deletion.deleted,
        skipped=scanner.stats.total_skipped,
        removed_paths=deletion.deleted_files,
    )
    logger.info("chart_files_to_keep", count=summary.kept)
    logger.info("chart_files_to_remove", count=summary.removed)
    return summary


def main(config: Optional[PrunerConfig] = None) -> int:
    config = config or PrunerConfig()
    try:
        settings = load_logging_settings(config)
        configure_logging(settings)
        run_pruner(config)
    except ChartPrunerError as e:
        logger.error("chart_pruner_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cli() -> None:
    raise SystemExit(main())
