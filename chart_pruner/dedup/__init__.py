"""
Chart tile dedup.

Modules:
- parser: Group key and date from a tile filename
- scanner: Recursive walk, newest-date-wins per group key
- deleter: Fail-fast deletion of superseded tiles
- models: Pydantic data models and the keep set
"""

from chart_pruner.dedup.models import (
    ChartFile,
    KeepSet,
    PruneSummary,
    ScanStats,
    slot_key,
)

__all__ = [
    "ChartFile",
    "KeepSet",
    "PruneSummary",
    "ScanStats",
    "slot_key",
]
