from __future__ import annotations

"""
Embedding Domain Data Models.

Defines the immutable records passed between the walker, the renderers
and the interface layer during a single generation run.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

# -----------------------------------------------------------------------------
# TRAVERSAL MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirEntryInfo:
    """
    Minimal view of a directory entry as returned by a directory lister.

    Attributes:
        name: Entry name (no path component).
        is_dir: True if the entry must be expanded as a directory.
    """
    name: str
    is_dir: bool


@dataclass(frozen=True)
class FileEntry:
    """
    A regular file found during traversal, with its content loaded.

    Attributes:
        directory: Raw directory segments relative to the input root.
        name: Raw file name.
        content: Complete file content.
        path: Absolute path of the source file.
    """
    directory: Tuple[str, ...]
    name: str
    content: bytes
    path: str = ""

# -----------------------------------------------------------------------------
# RENDERING MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ArrayDeclaration:
    """
    One embedded array: sanitized identifier plus the bytes it holds.

    Attributes:
        identifier: Valid C++ identifier for the array variable.
        data: Exact byte content of the array.
    """
    identifier: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

# -----------------------------------------------------------------------------
# RUN RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EmbedResult:
    """
    Summary of a completed generation run.

    Attributes:
        input_path: Normalized input root.
        output_path: Normalized output root.
        header_path: Absolute path of the aggregate header.
        source_files: Absolute paths of the generated sources, in traversal order.
        total_bytes: Sum of all embedded file sizes.
        dry_run: True if nothing was written to disk.
    """
    input_path: str
    output_path: str
    header_path: str
    source_files: List[str] = field(default_factory=list)
    total_bytes: int = 0
    dry_run: bool = False

    @property
    def file_count(self) -> int:
        return len(self.source_files)
