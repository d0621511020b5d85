from __future__ import annotations

"""
Path Tokenization Utilities.

Splits path strings into ordered segment lists. Both '/' and the
platform separator are accepted so that paths typed on the command line
and paths produced by the OS tokenize identically.
"""

import os
import re
from typing import List, Sequence, Tuple

_SEPARATORS = "".join(sorted({"/", os.sep, os.altsep or "/"}))
_SPLIT_RX = re.compile("[" + re.escape(_SEPARATORS) + "]")


def split_path(path: str) -> List[str]:
    """
    Split a path on its separators, discarding empty segments.

    Repeated separators collapse and leading/trailing separators vanish,
    so "/a//b/" yields ["a", "b"].

    Args:
        path: Path string to tokenize.

    Returns:
        List[str]: Ordered, non-empty path segments.
    """
    if not path:
        return []
    return [segment for segment in _SPLIT_RX.split(path) if segment]


def relative_segments(root: Sequence[str], path: Sequence[str]) -> Tuple[str, ...]:
    """
    Strip the leading root segments from a tokenized path.

    Args:
        root: Tokenized root directory.
        path: Tokenized path located at or below the root.

    Returns:
        Tuple[str, ...]: Segments of the path relative to the root.

    Raises:
        ValueError: If the path does not start with the root segments.
    """
    if tuple(path[:len(root)]) != tuple(root):
        raise ValueError(f"Path {list(path)} is not located under {list(root)}")
    return tuple(path[len(root):])
