"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


def write_file(path: Path, size: int) -> Path:
    """Create ``path`` (and its parents) holding ``size`` bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory ``a`` with file ``f`` (100 B) and subdirectory ``b`` holding ``g`` (50 B)."""
    root = tmp_path / "a"
    write_file(root / "f", 100)
    write_file(root / "b" / "g", 50)
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """A deeper tree with several subdirectories and an empty one.

    Layout (sizes in bytes)::

        root/
          top.bin            10
          big/               3000 total
            x.bin            1000
            deep/y/z.bin     2000
          small/             30 total
            s1               10
            s2               20
          empty/
    """
    root = tmp_path / "root"
    write_file(root / "top.bin", 10)
    write_file(root / "big" / "x.bin", 1000)
    write_file(root / "big" / "deep" / "y" / "z.bin", 2000)
    write_file(root / "small" / "s1", 10)
    write_file(root / "small" / "s2", 20)
    (root / "empty").mkdir()
    return root
