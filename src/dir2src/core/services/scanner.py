from __future__ import annotations

"""
Directory Traversal Service.

Enumerates every file below an input root with an explicit stack of
pending directories. The walk order is fixed:

1. Entries of a directory are sorted by name.
2. All files of a directory are yielded before any subdirectory is entered.
3. Subdirectories are entered in name order, and each subtree is finished
   before its next sibling starts (pre-order depth-first).

The header builder relies on this order: once the walk leaves a namespace
it never returns to it, so consecutive files only ever share a leading
prefix of their namespace paths.
"""

import logging
import os
from typing import Callable, Iterable, Iterator, List

from dir2src.core.pipeline.components.reader import read_file_bytes
from dir2src.core.processing.tokenizer import relative_segments, split_path
from dir2src.domain.errors import InputOpenError
from dir2src.domain.models import DirEntryInfo, FileEntry

logger = logging.getLogger(__name__)

DirectoryLister = Callable[[str], Iterable[DirEntryInfo]]
FileReader = Callable[[str], bytes]

_PSEUDO_ENTRIES = (".", "..")

# ==============================================================================
# PUBLIC API
# ==============================================================================

def list_directory(path: str) -> List[DirEntryInfo]:
    """
    List a directory on the real filesystem.

    Symlinks are never followed when deciding whether an entry is a
    directory, which keeps the walk free of cycles.

    Args:
        path: Directory to list.

    Returns:
        List[DirEntryInfo]: Entries of the directory, unsorted.
    """
    with os.scandir(path) as it:
        return [DirEntryInfo(name=e.name, is_dir=e.is_dir(follow_symlinks=False)) for e in it]


def walk_files(
        root: str,
        lister: DirectoryLister = list_directory,
        reader: FileReader = read_file_bytes,
) -> Iterator[FileEntry]:
    """
    Yield every file below root, with its content loaded.

    Args:
        root: Input root directory.
        lister: Provider of directory entries (injectable for tests).
        reader: Provider of file contents (injectable for tests).

    Yields:
        FileEntry: One entry per file, in the documented walk order.

    Raises:
        InputOpenError: If a directory cannot be listed or a file read.
    """
    root_abs = os.path.abspath(root)
    root_segments = split_path(root_abs)
    pending: List[str] = [root_abs]

    while pending:
        directory = pending.pop()
        directory_segments = relative_segments(root_segments, split_path(directory))

        try:
            entries = sorted(lister(directory), key=lambda e: e.name)
        except OSError as e:
            logger.debug(f"Failed to list directory '{directory}': {e}")
            raise InputOpenError(directory, e.strerror or str(e)) from e

        logger.debug(f"Scanning {directory} ({len(entries)} entries)")

        subdirectories: List[str] = []
        for entry in entries:
            if entry.name in _PSEUDO_ENTRIES:
                continue

            entry_path = os.path.join(directory, entry.name)
            if entry.is_dir:
                subdirectories.append(entry_path)
                continue

            yield FileEntry(
                directory=directory_segments,
                name=entry.name,
                content=reader(entry_path),
                path=entry_path,
            )

        # Reversed so the stack pops siblings in name order
        pending.extend(reversed(subdirectories))
