from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures building small input trees and in-memory listers.
"""

import os
import sys
from pathlib import Path
from typing import Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dir2src.domain.models import DirEntryInfo  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def asset_tree(tmp_path: Path) -> Path:
    """
    Create a small asset tree on disk.

    Structure:
    /assets
      logo.png          b"\\x89PNG"
      /fonts
        main-font.ttf   bytes(range(20))
      /shaders
        /gl
          basic.vert    b"void main(){}"
    """
    root = tmp_path / "assets"
    (root / "fonts").mkdir(parents=True)
    (root / "shaders" / "gl").mkdir(parents=True)

    (root / "logo.png").write_bytes(b"\x89PNG")
    (root / "fonts" / "main-font.ttf").write_bytes(bytes(range(20)))
    (root / "shaders" / "gl" / "basic.vert").write_bytes(b"void main(){}")
    return root


class FakeFileSystem:
    """
    In-memory directory tree for walker tests.

    Keys of 'files' are '/'-separated paths relative to 'root'. Listing
    returns entries in reverse name order so tests prove the walker sorts.
    """

    def __init__(self, root: str, files: Dict[str, bytes]) -> None:
        self.root = root
        self.files = {os.path.join(root, *k.split("/")): v for k, v in files.items()}
        self.listed: List[str] = []

    def list(self, path: str) -> List[DirEntryInfo]:
        self.listed.append(path)
        prefix = path.rstrip(os.sep) + os.sep
        children: Dict[str, bool] = {}
        for file_path in self.files:
            if not file_path.startswith(prefix):
                continue
            rest = file_path[len(prefix):].split(os.sep)
            children[rest[0]] = children.get(rest[0], False) or len(rest) > 1
        if not children and path != self.root:
            raise FileNotFoundError(2, "No such file or directory", path)
        entries = [DirEntryInfo(name=n, is_dir=d) for n, d in children.items()]
        entries += [DirEntryInfo(".", True), DirEntryInfo("..", True)]
        return sorted(entries, key=lambda e: e.name, reverse=True)

    def read(self, path: str) -> bytes:
        return self.files[path]


@pytest.fixture
def fake_fs_factory():
    """Return a factory building FakeFileSystem instances under an absolute root."""
    root = os.path.abspath(os.sep + "virtual_input")

    def _make(files: Dict[str, bytes]) -> FakeFileSystem:
        return FakeFileSystem(root, files)

    return _make
