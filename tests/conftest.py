"""
Shared pytest fixtures for the Chart Pruner tests.

- chart_tree: builds a chart directory under tmp_path from relative names
"""

import sys
from pathlib import Path

import pytest

# Add repo root to PYTHONPATH (once for every test module)
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def chart_root(tmp_path):
    """Empty chart root directory (no underscores in its own name)."""
    root = tmp_path / "charts"
    root.mkdir()
    return root


@pytest.fixture
def chart_tree(chart_root):
    """
    Factory creating tile files under chart_root.

    Usage:
        paths = chart_tree("A_20230101_1200_TIF", "sub/B_20230101_1200_TIF")
    """

    def _build(*names: str) -> list[Path]:
        paths = []
        for name in names:
            path = chart_root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"tile")
            paths.append(path)
        return paths

    return _build
