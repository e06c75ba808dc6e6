from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for on-disk sample trees and logging cleanup.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirtree.infra.logging import reset_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def clean_logging():
    """Detach handlers installed by the CLI so tests do not leak them."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a small directory tree on disk.

    Structure:
    /project
      /docs
        guide.md        (12 bytes)
      /src
        /pkg
          __init__.py   (empty)
          core.py       (5 bytes)
        main.py         (3 bytes)
      empty.txt         (empty)
      README            (4 bytes)
    """
    root = tmp_path / "project"
    root.mkdir()

    docs = root / "docs"
    docs.mkdir()
    (docs / "guide.md").write_bytes(b"# guide\nbody")

    src = root / "src"
    src.mkdir()
    pkg = src / "pkg"
    pkg.mkdir()
    (pkg / "__init__.py").write_bytes(b"")
    (pkg / "core.py").write_bytes(b"x = 1")
    (src / "main.py").write_bytes(b"run")

    (root / "empty.txt").write_bytes(b"")
    (root / "README").write_bytes(b"read")

    return root


@pytest.fixture
def two_entry_dir(tmp_path: Path) -> Path:
    """Directory 'a' holding an empty directory 'b' and a 5-byte 'c.txt'."""
    root = tmp_path / "a"
    root.mkdir()
    (root / "b").mkdir()
    (root / "c.txt").write_bytes(b"hello")
    return root

