"""
Chart tile filename parser.

Names look like ``<group fields>_<YYYYMMDD>_<time>_<ext>``, for example
``A_20230215_0900_TIF``. The group key comes from the filename alone while
the date token is counted from the end of the full path string. The two
only disagree when the filename has exactly three fields and a parent
directory: the date token then carries the directory prefix and fails to
parse.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from chart_pruner.config.exceptions import DateFormatError

FIELD_SEPARATOR = "_"
TRAILING_FIELDS = 3  # date, time, extension

BASIC_CALENDAR_DATE = re.compile(r"[0-9]{8}")


def parse_basic_calendar_date(token: str) -> date:
    """
    Parse an ISO-8601 basic calendar date (``YYYYMMDD``).

    Raises:
        DateFormatError: If the token is not eight digits or not a real date
    """
    if not BASIC_CALENDAR_DATE.fullmatch(token):
        raise DateFormatError(
            token,
            ValueError(f"expected basic calendar date YYYYMMDD, got {token!r}"),
        )
    try:
        return datetime.strptime(token, "%Y%m%d").date()
    except ValueError as e:
        raise DateFormatError(token, e) from e


def parse_chart_path(path: Union[str, PathLike]) -> Optional[tuple[str, date]]:
    """
    Derive ``(group_key, date)`` from a chart tile path.

    Args:
        path: Path of the tile on disk

    Returns:
        The pair, or None when the filename has fewer than three fields

    Raises:
        DateFormatError: If the date token is present but malformed
    """
    path_str = str(path)
    name_fields = Path(path_str).name.split(FIELD_SEPARATOR)
    if len(name_fields) < TRAILING_FIELDS:
        return None
    group_key = FIELD_SEPARATOR.join(name_fields[:-TRAILING_FIELDS])

    # Counted on the full path, not the filename
    path_fields = path_str.split(FIELD_SEPARATOR)
    if len(path_fields) < TRAILING_FIELDS:
        return None
    date_token = path_fields[-TRAILING_FIELDS]

    return group_key, parse_basic_calendar_date(date_token)
