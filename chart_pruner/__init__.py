"""
Chart Pruner.

Keeps the newest dated copy of every chart tile under a directory tree and
deletes the older ones.
"""

__version__ = "0.1.0"
