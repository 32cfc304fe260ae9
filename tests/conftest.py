from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared workspace fixtures built under pytest's tmp_path.
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

from ponderfs.domain.config import InspectorConfig  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """
    Create the reference workspace.

    Structure:
    /ws
      /src
        main.txt   (10 bytes)
      /.git
        HEAD
    """
    ws = tmp_path / "ws"
    ws.mkdir()

    src = ws / "src"
    src.mkdir()
    (src / "main.txt").write_bytes(b"0123456789")

    git = ws / ".git"
    git.mkdir()
    (git / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")

    return ws


@pytest.fixture
def small_config() -> InspectorConfig:
    """Return a configuration with tight limits for boundary tests."""
    return InspectorConfig(
        max_depth=3,
        max_nodes=3,
        large_file_threshold=16,
        default_max_read_bytes=32,
        binary_probe_bytes=8,
    )
