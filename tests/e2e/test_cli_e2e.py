from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess: exit codes, stream output (stdout/stderr) and file
system side effects (archive generation).
"""

import json
import os
import subprocess
import sys
import zipfile
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "rootzip" / "main.py"


def run_cli(args: List[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH so the package resolves
    without being installed.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_no_arguments_prints_usage(tmp_path: Path) -> None:
    result = run_cli([], cwd=tmp_path)

    assert result.returncode == 0
    assert "Usage of rootzip" in result.stdout
    assert "-to=out/path" in result.stdout
    assert list(tmp_path.iterdir()) == []


def test_archives_scenario_inputs(sample_project: Path, workdir: Path) -> None:
    result = run_cli([str(sample_project / "src"), str(sample_project / "README.md")], cwd=workdir)

    assert result.returncode == 0, result.stderr
    archive = workdir / "src.zip"
    assert archive.is_file()
    assert "Created src.zip" in result.stdout

    with zipfile.ZipFile(archive) as zf:
        names = zf.namelist()
    assert names[0] == "src/"
    assert "src/empty/" in names
    assert "src/pkg/blob.bin" in names
    assert names[-1] == "README.md"


def test_second_run_gets_suffix(sample_project: Path, workdir: Path) -> None:
    first = run_cli([str(sample_project / "README.md")], cwd=workdir)
    second = run_cli([str(sample_project / "README.md")], cwd=workdir)

    assert first.returncode == 0 and second.returncode == 0
    assert (workdir / "README.zip").is_file()
    assert (workdir / "README (2).zip").is_file()


def test_explicit_output_overwrites(sample_project: Path, workdir: Path) -> None:
    target = workdir / "custom.zip"
    target.write_bytes(b"stale")

    result = run_cli([f"-to={target}", str(sample_project / "README.md")], cwd=workdir)

    assert result.returncode == 0, result.stderr
    with zipfile.ZipFile(target) as zf:
        assert zf.namelist() == ["README.md"]


def test_mismatched_parents_abort(tmp_path: Path, workdir: Path) -> None:
    for folder, name in (("a", "x.txt"), ("b", "y.txt")):
        (tmp_path / folder).mkdir()
        (tmp_path / folder / name).write_text(name, encoding="utf-8")

    result = run_cli([str(tmp_path / "a" / "x.txt"), str(tmp_path / "b" / "y.txt")], cwd=workdir)

    assert result.returncode == 1
    assert "ERROR:" in result.stderr
    assert "same folder" in result.stderr
    assert list(workdir.iterdir()) == []


def test_json_summary(sample_project: Path, workdir: Path) -> None:
    result = run_cli(["--json", "--dry-run", str(sample_project / "src")], cwd=workdir)

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["dry_run"] is True
    assert payload["output_path"] == "src.zip"
    assert "src/empty/" in payload["entries"]
    assert list(workdir.iterdir()) == []
