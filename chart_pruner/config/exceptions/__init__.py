"""
Chart Pruner - Canonical exception hierarchy.

Every fatal condition raised by the pruner derives from ChartPrunerError.
Lower-level errors (OSError, ValueError) are wrapped and chained so the
entry point can print a single display form and exit non-zero.
"""

from __future__ import annotations


class ChartPrunerError(Exception):
    """Base exception Chart Pruner."""


class ChartIOError(ChartPrunerError):
    """Filesystem failure while listing, inspecting or deleting."""

    def __init__(self, cause: OSError):
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"IOError: {self.cause}"


class DateFormatError(ChartPrunerError):
    """Date token that is not a basic calendar date (YYYYMMDD)."""

    def __init__(self, token: str, cause: ValueError):
        super().__init__(token, cause)
        self.token = token
        self.cause = cause

    def __str__(self) -> str:
        return f"FormatError: {self.cause}"


class ConfigurationError(ChartPrunerError):
    """Invalid configuration sourced from the environment."""
