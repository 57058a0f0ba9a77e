from __future__ import annotations

"""
Unit tests for the Argument Resolver stage.

Verifies:
1. Common root validation (accept same parent, reject mismatches).
2. Default output naming with ' (n)' collision avoidance.
3. Verbatim use of an explicit output path.
"""

import os
from pathlib import Path

import pytest

from rootzip.core.pipeline.stages.resolver import (
    default_output_path,
    resolve_paths,
    validate_common_root,
)
from rootzip.domain.errors import ConfigurationError
from rootzip.domain.pipeline_models import build_config

# -----------------------------------------------------------------------------
# ROOT VALIDATION
# -----------------------------------------------------------------------------

def test_validate_common_root_accepts_siblings(sample_project: Path) -> None:
    root = validate_common_root([
        str(sample_project / "src"),
        str(sample_project / "README.md"),
    ])
    assert root == str(sample_project)


def test_validate_common_root_rejects_different_parents(tmp_path: Path) -> None:
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()

    with pytest.raises(ConfigurationError, match="same folder"):
        validate_common_root([
            str(tmp_path / "a" / "x.txt"),
            str(tmp_path / "b" / "y.txt"),
        ])


def test_validate_common_root_mixes_relative_and_absolute(sample_project: Path, monkeypatch) -> None:
    monkeypatch.chdir(sample_project)
    root = validate_common_root(["src", str(sample_project / "README.md")])
    assert root == str(sample_project)


def test_validate_common_root_requires_inputs() -> None:
    with pytest.raises(ConfigurationError):
        validate_common_root([])

# -----------------------------------------------------------------------------
# DEFAULT OUTPUT NAMING
# -----------------------------------------------------------------------------

def test_default_output_path_replaces_extension(workdir: Path) -> None:
    assert default_output_path("/data/project/notes.txt") == "notes.zip"
    assert default_output_path("/data/project/src") == "src.zip"


def test_default_output_path_avoids_collisions(workdir: Path) -> None:
    (workdir / "src.zip").write_bytes(b"first")
    assert default_output_path("/data/project/src") == "src (2).zip"

    (workdir / "src (2).zip").write_bytes(b"second")
    assert default_output_path("/data/project/src") == "src (3).zip"


def test_default_output_path_for_current_folder(workdir: Path) -> None:
    """'.' is named after the folder it points to."""
    assert default_output_path(".") == f"{workdir.name}.zip"


def test_default_output_path_for_filesystem_root(workdir: Path) -> None:
    """A path without a base name falls back to 'archive'."""
    assert default_output_path(os.path.abspath(os.sep)) == "archive.zip"

    (workdir / "archive.zip").write_bytes(b"taken")
    assert default_output_path(os.path.abspath(os.sep)) == "archive (2).zip"


def test_default_output_path_treats_directories_as_occupied(workdir: Path) -> None:
    (workdir / "src.zip").mkdir()
    assert default_output_path("src") == "src (2).zip"

# -----------------------------------------------------------------------------
# FULL RESOLUTION
# -----------------------------------------------------------------------------

def test_resolve_paths_uses_explicit_output_verbatim(sample_project: Path, workdir: Path) -> None:
    existing = workdir / "taken.zip"
    existing.write_bytes(b"old")

    cfg = build_config([str(sample_project / "src")], output_path=str(existing))
    resolved = resolve_paths(cfg)

    assert resolved.output_path == str(existing)
    assert resolved.root == str(sample_project)


def test_resolve_paths_defaults_to_primary_name(sample_project: Path, workdir: Path) -> None:
    cfg = build_config([str(sample_project / "README.md"), str(sample_project / "src")])
    resolved = resolve_paths(cfg)

    assert resolved.output_path == "README.zip"
