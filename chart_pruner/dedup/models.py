"""
Pydantic models for the chart dedup pass.

Models:
- ChartFile: One dated chart tile found on disk
- KeepSet: Best file per group key, unique by slot
- ScanStats: Counters for a walk
- PruneSummary: Final result of a run
"""

from __future__ import annotations

import datetime
from pathlib import Path
from typing import Iterator, Optional

from pydantic import BaseModel, Field


class ChartFile(BaseModel):
    """Chart tile with its group key and the date parsed from its name."""

    group_key: str = Field(description="Filename without its date/time/extension fields")
    date: datetime.date
    full_path: Path

    def __str__(self) -> str:
        return f"{self.group_key}/{self.date}"


def slot_key(chart_file: ChartFile) -> str:
    """
    Key deciding whether two files occupy the same slot.

    Only the group key counts: date and path are ignored. Use this rather
    than ``==`` on ChartFile, which compares every field.
    """
    return chart_file.group_key


class KeepSet:
    """
    Currently kept file per slot, iterated in group-key order.

    At most one ChartFile per slot_key.
    """

    def __init__(self) -> None:
        self._entries: dict[str, ChartFile] = {}

    def __contains__(self, chart_file: ChartFile) -> bool:
        return slot_key(chart_file) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ChartFile]:
        for key in sorted(self._entries):
            yield self._entries[key]

    def find(self, chart_file: ChartFile) -> Optional[ChartFile]:
        """Return the entry in the same slot, if any."""
        return self._entries.get(slot_key(chart_file))

    def take(self, chart_file: ChartFile) -> Optional[ChartFile]:
        """Remove and return the entry in the same slot, if any."""
        return self._entries.pop(slot_key(chart_file), None)

    def insert(self, chart_file: ChartFile) -> bool:
        """
        Insert a file into an empty slot.

        Returns:
            False if the slot is already taken (the set is left unchanged)
        """
        key = slot_key(chart_file)
        if key in self._entries:
            return False
        self._entries[key] = chart_file
        return True

    def paths(self) -> list[Path]:
        return [entry.full_path for entry in self]


class ScanStats(BaseModel):
    """Walk statistics."""

    total_seen: int = 0
    total_skipped: int = 0
    skipped_paths: list[Path] = Field(default_factory=list)


class PruneSummary(BaseModel):
    """Final result of a prune run."""

    kept: int = 0
    removed: int = 0
    skipped: int = 0
    removed_paths: list[Path] = Field(default_factory=list)
