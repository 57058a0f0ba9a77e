from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures that lay out sample project trees on disk.
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


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
BINARY_PAYLOAD = bytes(range(256)) * 64


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a small project tree.

    Structure:
    /project
      /src
        main.py
        /pkg
          util.py
          blob.bin
        /empty
      README.md
    """
    project = tmp_path / "project"
    src = project / "src"
    pkg = src / "pkg"
    pkg.mkdir(parents=True)
    (src / "empty").mkdir()

    (src / "main.py").write_text("print('hello')\n", encoding="utf-8")
    (pkg / "util.py").write_text("def util():\n    return 42\n", encoding="utf-8")
    (pkg / "blob.bin").write_bytes(BINARY_PAYLOAD)
    (project / "README.md").write_text("# Sample\n", encoding="utf-8")

    return project


@pytest.fixture
def binary_payload() -> bytes:
    """Bytes stored in src/pkg/blob.bin of the sample project."""
    return BINARY_PAYLOAD


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working folder (default outputs land here)."""
    out = tmp_path / "out"
    out.mkdir()
    monkeypatch.chdir(out)
    return out
