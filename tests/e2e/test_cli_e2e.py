from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes,
stream output and generated artifacts.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "dir2src" / "main.py"


def run_cli(args: List[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.

    Args:
        args: Command line arguments (excluding 'python' and script path).
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: Result with returncode, stdout and stderr.
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


def test_cli_happy_path_execution(tmp_path: Path, asset_tree: Path) -> None:
    """TC-01: A standard run generates one source per file plus the header."""
    out = tmp_path / "generated"

    result = run_cli(["-p", "--root-namespace", "Res", str(asset_tree), str(out)])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert result.stdout.splitlines() == [
        str(out / "logo.png.cpp"),
        str(out / "fonts" / "main-font.ttf.cpp"),
        str(out / "shaders" / "gl" / "basic.vert.cpp"),
    ]

    header = (out / "bin.h").read_text(encoding="utf-8")
    assert "#pragma once" in header
    assert "namespace Res {" in header
    assert "extern std::array<uint8_t, 20> main_font_ttf;" in header


def test_cli_relative_paths(tmp_path: Path, asset_tree: Path) -> None:
    """TC-02: Relative paths resolve against the working directory."""
    result = run_cli([asset_tree.name, "out", "-p"], cwd=asset_tree.parent)

    assert result.returncode == 0, result.stderr
    first = result.stdout.splitlines()[0]
    assert os.path.isabs(first)
    assert (tmp_path / "out" / "logo.png.cpp").is_file()


def test_cli_unknown_flag(tmp_path: Path, asset_tree: Path) -> None:
    """TC-03: Unknown flags fail with a nonzero status and write nothing."""
    out = tmp_path / "out"

    result = run_cli(["--bogus", str(asset_tree), str(out)])

    assert result.returncode != 0
    assert "--bogus" in result.stderr
    assert not out.exists()


def test_cli_help_overrides_unknown_flag(tmp_path: Path, asset_tree: Path) -> None:
    """TC-03b: -h prints usage and exits 0 even next to an unknown flag."""
    out = tmp_path / "out"

    result = run_cli(["--bogus", "-h", str(asset_tree), str(out)])

    assert result.returncode == 0
    assert "usage:" in result.stdout
    assert not out.exists()


def test_cli_missing_output_path_prints_help(tmp_path: Path, asset_tree: Path) -> None:
    """TC-04: A missing positional prints help and exits 0."""
    result = run_cli([str(asset_tree)], cwd=tmp_path)

    assert result.returncode == 0
    assert "usage:" in result.stdout
    assert sorted(p.name for p in tmp_path.iterdir()) == ["assets"]


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    """TC-05: A missing input directory exits with status 2."""
    result = run_cli([str(tmp_path / "ghost"), str(tmp_path / "out")])

    assert result.returncode == 2
    assert "ghost" in result.stderr


def test_cli_dry_run(tmp_path: Path, asset_tree: Path) -> None:
    """TC-06: Dry runs list outputs without creating them."""
    out = tmp_path / "out"

    result = run_cli(["--dry-run", "-p", str(asset_tree), str(out)])

    assert result.returncode == 0
    assert len(result.stdout.splitlines()) == 3
    assert not out.exists()
